"""
Registration hub for the add-on.
Every subclass is collected on definition so the package entry point can
register them in one loop.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import ClassVar


class RegisterBase(ABC):
    """Collects subclasses that own a register/unregister pair."""

    _registry: ClassVar[list[type["RegisterBase"]]] = []

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if cls in RegisterBase._registry:
            return
        RegisterBase._registry.append(cls)

    @classmethod
    def registered_classes(cls) -> tuple[type["RegisterBase"], ...]:
        return tuple(cls._registry)

    @classmethod
    def register_all(cls) -> None:
        """Register every collected subclass in definition order."""
        for subcls in cls._registry:
            subcls.register()

    @classmethod
    def unregister_all(cls) -> None:
        """Unregister every collected subclass, last one first."""
        for subcls in reversed(cls._registry):
            subcls.unregister()

    @classmethod
    @abstractmethod
    def register(cls) -> None:
        raise NotImplementedError

    @classmethod
    @abstractmethod
    def unregister(cls) -> None:
        raise NotImplementedError
