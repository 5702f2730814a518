# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Capability registry.

Variants opt into capabilities one at a time, either explicitly through
:meth:`CapabilityRegistry.implement` or ambiently: while a registry is
:meth:`binding <CapabilityRegistry.binding>`, classes decorated with
:func:`implements` are registered with it automatically.

Conformance is checked when the variant is registered, so a variant that
cannot honor a capability fails at class definition time instead of when the
operation is first invoked.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
import inspect
from typing import Any

from .capability import (
    CapabilityConflictError,
    CapabilityDefinitionError,
    CapabilityError,
    CapabilityNotImplementedError,
    CapabilitySpec,
    provides,
    require_spec,
)
from .utils import get_logger


class RegistrySealedError(CapabilityError):
    """Raised when a sealed registry is mutated."""


class RegistryValidationError(CapabilityError):
    """Raised when registered variants no longer honor their capabilities."""


@dataclass(slots=True)
class RegistryConfig:
    """Registry behaviour switches."""

    allow_late_binding: bool = False


@dataclass(frozen=True, slots=True)
class Implementation:
    """A variant's registered implementation of one capability."""

    variant: type
    capability: type
    body: Callable[..., Any] | None = None

    @property
    def native(self) -> bool:
        return self.body is None


_VARIANT_ATTR = "__solidcap_capabilities__"
_ACTIVE_REGISTRY: ContextVar[CapabilityRegistry | None] = ContextVar("_solidcap_active_registry", default=None)
_MISSING = object()


def get_active_registry() -> CapabilityRegistry | None:
    """Return the registry currently binding variants, if any."""
    return _ACTIVE_REGISTRY.get()


def declared_capabilities(variant: type) -> tuple[type, ...]:
    """Capabilities recorded on *variant*, including those inherited from bases."""
    return tuple(getattr(variant, _VARIANT_ATTR, ()))


def _record(variant: type, capability: type) -> None:
    current = declared_capabilities(variant)
    if capability not in current:
        setattr(variant, _VARIANT_ATTR, (*current, capability))


def _attach(variant: type, spec: CapabilitySpec, body: Callable[..., Any]) -> bool:
    existing = inspect.getattr_static(variant, spec.operation, _MISSING)
    if existing is body or (isinstance(existing, property) and existing.fget is body):
        return False
    if existing is not _MISSING:
        raise CapabilityConflictError(
            f"{variant.__qualname__}.{spec.operation} is already defined or inherited; "
            f"refusing to replace it with the {spec.name} body"
        )
    setattr(variant, spec.operation, property(body) if spec.kind == "property" else body)
    return True


def _missing_message(variant: type, spec: CapabilitySpec) -> str:
    return f"{variant.__qualname__} does not implement {spec.name}.{spec.operation} ({spec.kind})"


class CapabilityRegistry:
    """Tracks which variants implement which capabilities."""

    def __init__(self, name: str = "default", *, config: RegistryConfig | None = None) -> None:
        self.name = name
        self._config = config or RegistryConfig()
        self._implementations: dict[tuple[type, type], Implementation] = {}
        self._sealed = False
        self._logger = get_logger("solidcap.registry")

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------

    def implement(
        self,
        variant: type,
        capability: type,
        body: Callable[..., Any] | None = None,
    ) -> Implementation:
        """Associate *variant* with *capability*.

        When *body* is given it becomes the variant's operation (wrapped in a
        :class:`property` for property capabilities).  Without a body the
        variant must already define the operation itself.  A body never
        replaces an operation the variant defines or inherits.

        Raises:
            CapabilityConflictError: *body* would replace an existing attribute.
            CapabilityNotImplementedError: the variant still lacks the operation.
            RegistrySealedError: the registry is sealed.
        """
        self._ensure_mutable()
        spec = require_spec(capability)
        if not isinstance(variant, type):
            raise TypeError(f"implement() expects a variant type, got {variant!r}")

        attached = False
        if body is not None:
            if not callable(body):
                raise CapabilityDefinitionError(f"Body for {spec.name}.{spec.operation} must be callable")
            attached = _attach(variant, spec, body)

        if not provides(variant, spec):
            if attached:
                delattr(variant, spec.operation)
            raise CapabilityNotImplementedError(_missing_message(variant, spec))

        _record(variant, capability)
        implementation = Implementation(variant=variant, capability=capability, body=body)
        self._implementations[(variant, capability)] = implementation
        self._logger.debug(
            "capability implemented",
            extra={
                "context": {
                    "registry": self.name,
                    "variant": variant.__qualname__,
                    "capability": spec.name,
                    "native": implementation.native,
                }
            },
        )
        return implementation

    @contextmanager
    def binding(self) -> Iterator[CapabilityRegistry]:
        """Register :func:`implements`-decorated classes defined in this block."""
        self._ensure_mutable()
        token = _ACTIVE_REGISTRY.set(self)
        try:
            yield self
        finally:
            _ACTIVE_REGISTRY.reset(token)

    def seal(self) -> None:
        """Reject further registrations unless late binding is allowed."""
        self._sealed = True
        self._logger.debug(
            "registry sealed",
            extra={"context": {"registry": self.name, "implementations": len(self._implementations)}},
        )

    @property
    def sealed(self) -> bool:
        return self._sealed

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_registered(self, variant: type, capability: type) -> bool:
        return (variant, capability) in self._implementations

    def variants_for(self, capability: type) -> list[type]:
        """Variants registered for *capability*, in registration order."""
        require_spec(capability)
        return [impl.variant for impl in self._implementations.values() if impl.capability is capability]

    def capabilities_of(self, variant: type) -> list[type]:
        """Capabilities *variant* was registered for, in registration order."""
        return [impl.capability for impl in self._implementations.values() if impl.variant is variant]

    @property
    def implementations(self) -> list[Implementation]:
        return list(self._implementations.values())

    def validate(self) -> None:
        """Re-check every registered variant against its capability.

        Raises:
            RegistryValidationError: listing every variant that no longer
                provides its operation.
        """
        errors: list[str] = []
        for impl in self._implementations.values():
            spec = require_spec(impl.capability)
            if not provides(impl.variant, spec):
                errors.append(_missing_message(impl.variant, spec))

        if errors:
            raise RegistryValidationError("; ".join(errors))

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _ensure_mutable(self) -> None:
        if self._sealed and not self._config.allow_late_binding:
            raise RegistrySealedError(
                f"Registry {self.name!r} is sealed. Enable RegistryConfig(allow_late_binding=True) "
                "to permit registrations after sealing."
            )

    def __repr__(self) -> str:
        return f"CapabilityRegistry(name={self.name!r}, implementations={len(self._implementations)})"


def implements(*capabilities: type) -> Callable[[type], type]:
    """Class decorator declaring the capabilities a variant honors.

    Conformance is checked as soon as the class is defined.  If a registry is
    binding, the variant is registered with it as well.
    """
    if not capabilities:
        raise CapabilityDefinitionError("implements() requires at least one capability")
    specs = [require_spec(capability) for capability in capabilities]

    def decorator(cls: type) -> type:
        missing = [_missing_message(cls, spec) for spec in specs if not provides(cls, spec)]
        if missing:
            raise CapabilityNotImplementedError("; ".join(missing))

        registry = get_active_registry()
        for capability in capabilities:
            if registry is not None:
                registry.implement(cls, capability)
            else:
                _record(cls, capability)
        return cls

    return decorator


__all__ = [
    "CapabilityRegistry",
    "Implementation",
    "RegistryConfig",
    "RegistrySealedError",
    "RegistryValidationError",
    "declared_capabilities",
    "get_active_registry",
    "implements",
]
