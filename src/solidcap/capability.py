# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Capability definitions for solidcap.

A capability is a :class:`typing.Protocol` that declares exactly one public
operation, either a method or a read-only property.  Definitions are checked
when the class is created, so a protocol that bundles unrelated operations
never makes it past import time::

    @capability
    class Area(Protocol):
        @property
        def area(self) -> float: ...

The functional form builds the same protocol from a stub::

    def save(self, text: str) -> None: ...

    Storage = define_capability(save, name="Storage")

Conformance is always structural: :func:`conforms` and :func:`invoke` look up
the operation by name and never inspect a value's concrete type.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
import inspect
import types as pytypes
from typing import Any, Literal, Protocol, runtime_checkable
import weakref


OperationKind = Literal["method", "property"]


class CapabilityError(RuntimeError):
    """Base class for capability definition and conformance failures."""


class CapabilityDefinitionError(CapabilityError):
    """Raised when a capability definition is malformed."""


class CapabilityNotImplementedError(CapabilityError):
    """Raised when a variant or value does not provide a capability's operation."""


class CapabilityConflictError(CapabilityError):
    """Raised when an operation body would replace an unrelated attribute."""


@dataclass(frozen=True, slots=True)
class CapabilitySpec:
    """In-memory representation of a capability definition."""

    name: str
    operation: str
    kind: OperationKind
    signature: inspect.Signature
    description: str = ""


_SPECS: weakref.WeakKeyDictionary[type, CapabilitySpec] = weakref.WeakKeyDictionary()
_MISSING = object()


def _operation_members(cls: type) -> dict[str, tuple[str, Any]]:
    members: dict[str, tuple[str, Any]] = {}
    for key, value in vars(cls).items():
        if key.startswith("_"):
            continue
        if isinstance(value, property):
            members[key] = ("property", value.fget)
        elif isinstance(value, (staticmethod, classmethod)):
            members[key] = ("method", value.__func__)
        elif callable(value):
            members[key] = ("method", value)
        else:
            members[key] = ("attribute", value)

    for key in inspect.get_annotations(cls):
        if not key.startswith("_") and key not in members:
            members[key] = ("attribute", None)
    return members


def capability(
    cls: type | None = None,
    *,
    name: str | None = None,
    description: str | None = None,
) -> Any:
    """Decorator that turns a single-operation protocol into a capability.

    Usable bare (``@capability``) or with options (``@capability(name=...)``).
    The decorated protocol becomes runtime checkable.

    Raises:
        CapabilityDefinitionError: If the class is not a protocol, extends
            another capability, or does not declare exactly one operation.
    """

    def decorator(target: type) -> type:
        if not isinstance(target, type) or not getattr(target, "_is_protocol", False):
            raise CapabilityDefinitionError(
                f"{getattr(target, '__qualname__', target)!r} must subclass typing.Protocol"
            )

        for base in target.__mro__[1:]:
            if base in _SPECS:
                raise CapabilityDefinitionError(
                    f"{target.__qualname__} extends capability {base.__qualname__}; "
                    "compose capabilities on variants instead"
                )

        members = _operation_members(target)
        data = sorted(key for key, (kind, _) in members.items() if kind == "attribute")
        if data:
            raise CapabilityDefinitionError(
                f"{target.__qualname__} declares data members {data}; capabilities expose operations only"
            )
        if len(members) != 1:
            raise CapabilityDefinitionError(
                f"{target.__qualname__} must declare exactly one operation, found {sorted(members) or 'none'}"
            )

        operation, (kind, fn) = next(iter(members.items()))
        if fn is None or not callable(fn):
            raise CapabilityDefinitionError(f"{target.__qualname__}.{operation} has no getter")

        desc = (description if description is not None else (target.__doc__ or "")).strip()
        spec = CapabilitySpec(
            name=name or target.__name__,
            operation=operation,
            kind=kind,  # type: ignore[arg-type]
            signature=inspect.signature(fn),
            description=desc,
        )
        checked = runtime_checkable(target)
        _SPECS[checked] = spec
        return checked

    if cls is None:
        return decorator
    return decorator(cls)


def define_capability(
    operation: Callable[..., Any] | property,
    *,
    name: str | None = None,
    description: str | None = None,
) -> type:
    """Build a capability protocol from an operation stub.

    The stub's signature becomes the operation signature; it must take
    ``self`` as its first parameter.  Pass a :class:`property` to declare a
    read-only attribute operation.
    """
    fn = operation.fget if isinstance(operation, property) else operation
    if fn is None or not callable(fn):
        raise CapabilityDefinitionError(f"Cannot build a capability from {operation!r}")

    op_name = getattr(fn, "__name__", "")
    if not op_name.isidentifier() or op_name.startswith("_"):
        raise CapabilityDefinitionError(f"Operation name {op_name!r} must be a public identifier")

    params = list(inspect.signature(fn).parameters)
    if not params or params[0] != "self":
        raise CapabilityDefinitionError(f"Operation {op_name!r} must take 'self' as its first parameter")

    cap_name = name or op_name.title().replace("_", "")
    namespace = {
        "__module__": getattr(fn, "__module__", __name__),
        "__qualname__": cap_name,
        "__doc__": description if description is not None else fn.__doc__,
        op_name: operation,
    }
    proto = pytypes.new_class(cap_name, (Protocol,), {}, lambda ns: ns.update(namespace))
    return capability(proto, name=cap_name, description=description)


def extract_capability_spec(obj: Any) -> CapabilitySpec | None:
    """Return the :class:`CapabilitySpec` for *obj*, if it is a capability."""
    if not isinstance(obj, type):
        return None
    return _SPECS.get(obj)


def require_spec(obj: Any) -> CapabilitySpec:
    """Like :func:`extract_capability_spec` but raises for non-capabilities."""
    spec = extract_capability_spec(obj)
    if spec is None:
        raise CapabilityDefinitionError(f"{obj!r} is not a capability; decorate it with @capability")
    return spec


def _instance_dict(target: Any) -> dict[str, Any]:
    try:
        return object.__getattribute__(target, "__dict__")
    except AttributeError:
        return {}


def _placeholder_calls(spec: CapabilitySpec) -> list[tuple[list[Any], dict[str, Any]]]:
    """Argument shapes a caller of *spec*'s operation may use, minus ``self``."""
    full_args: list[Any] = []
    full_kwargs: dict[str, Any] = {}
    required_args: list[Any] = []
    required_kwargs: dict[str, Any] = {}
    for param in list(spec.signature.parameters.values())[1:]:
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        required = param.default is param.empty
        if param.kind is param.KEYWORD_ONLY:
            full_kwargs[param.name] = None
            if required:
                required_kwargs[param.name] = None
        else:
            full_args.append(None)
            if required:
                required_args.append(None)
    return [(full_args, full_kwargs), (required_args, required_kwargs)]


def _accepts_call(attr: Any, spec: CapabilitySpec, *, bound: bool) -> bool:
    fn, leading = attr, 1 if bound else 0
    if isinstance(attr, staticmethod):
        fn, leading = attr.__func__, 0
    elif isinstance(attr, classmethod):
        fn, leading = attr.__func__, 1
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        # builtins without introspectable signatures
        return True

    for args, kwargs in _placeholder_calls(spec):
        try:
            signature.bind(*([None] * leading), *args, **kwargs)
        except TypeError:
            return False
    return True


def provides(target: Any, spec: CapabilitySpec) -> bool:
    """Return whether *target* (a type or an instance) exposes the operation.

    Property operations must be readable without a call, so plain functions
    do not satisfy them.  Method operations must be callable with the
    capability's parameters.
    """
    attr = inspect.getattr_static(target, spec.operation, _MISSING)
    if attr is _MISSING:
        return False
    if spec.kind == "property":
        return not (inspect.isfunction(attr) or isinstance(attr, (staticmethod, classmethod)))
    if not (callable(attr) or isinstance(attr, (staticmethod, classmethod))):
        return False
    on_instance = not isinstance(target, type) and spec.operation in _instance_dict(target)
    return _accepts_call(attr, spec, bound=inspect.isfunction(attr) and not on_instance)


def conforms(target: Any, capability: type) -> bool:
    """Structural conformance check for a variant type or a value."""
    return provides(target, require_spec(capability))


def invoke(value: Any, capability: type, *args: Any, **kwargs: Any) -> Any:
    """Run *capability*'s operation on *value*.

    Property operations are read; method operations are called with the given
    arguments.
    """
    spec = require_spec(capability)
    if not provides(value, spec):
        raise CapabilityNotImplementedError(
            f"{type(value).__qualname__} does not implement {spec.name}.{spec.operation}"
        )
    member = getattr(value, spec.operation)
    if spec.kind == "property":
        if args or kwargs:
            raise TypeError(f"{spec.name}.{spec.operation} is a property and takes no arguments")
        return member
    return member(*args, **kwargs)


__all__ = [
    "CapabilityConflictError",
    "CapabilityDefinitionError",
    "CapabilityError",
    "CapabilityNotImplementedError",
    "CapabilitySpec",
    "OperationKind",
    "capability",
    "conforms",
    "define_capability",
    "extract_capability_spec",
    "invoke",
    "provides",
    "require_spec",
]
