"""Driver factory registry — named constructors registered at startup."""

import sys
from typing import Any, Callable, Dict, List


def _log(msg: str):
    print(msg, file=sys.stderr)


def _same_callable(a: Callable[..., Any], b: Callable[..., Any]) -> bool:
    # Bound methods of two factory instances count as the same constructor.
    return getattr(a, "__func__", a) is getattr(b, "__func__", b)


class DriverRegistrationError(ValueError):
    """Raised when a different factory is registered under a taken name."""


class UnknownDriverError(KeyError):
    """Raised when creating from a name nobody registered."""


class DriverRegistry:
    """Maps factory names (e.g. ``create_for_discord``) to callables.

    Populated explicitly by the composition root, typically through
    ``DiscordDriver.load_extension(registry)``.
    """

    def __init__(self):
        self._factories: Dict[str, Callable[..., Any]] = {}

    def extend(self, name: str, factory: Callable[..., Any]) -> None:
        existing = self._factories.get(name)
        if existing is not None:
            if _same_callable(existing, factory):
                return
            raise DriverRegistrationError(f"factory {name!r} is already registered")
        self._factories[name] = factory
        _log(f"[registry] registered {name}")

    def create(self, name: str, *args, **kwargs) -> Any:
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownDriverError(name)
        return factory(*args, **kwargs)

    def names(self) -> List[str]:
        return sorted(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories
