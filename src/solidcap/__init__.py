# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""solidcap: single-operation capabilities and the SOLID walkthrough."""

from __future__ import annotations

from .aggregate import Aggregator, aggregate
from .capability import (
    CapabilityConflictError,
    CapabilityDefinitionError,
    CapabilityError,
    CapabilityNotImplementedError,
    CapabilitySpec,
    capability,
    conforms,
    define_capability,
    extract_capability_spec,
    invoke,
)
from .registry import (
    CapabilityRegistry,
    RegistryConfig,
    RegistrySealedError,
    RegistryValidationError,
    declared_capabilities,
    implements,
)


__all__ = [
    "Aggregator",
    "CapabilityConflictError",
    "CapabilityDefinitionError",
    "CapabilityError",
    "CapabilityNotImplementedError",
    "CapabilityRegistry",
    "CapabilitySpec",
    "RegistryConfig",
    "RegistrySealedError",
    "RegistryValidationError",
    "aggregate",
    "capability",
    "conforms",
    "declared_capabilities",
    "define_capability",
    "extract_capability_spec",
    "implements",
    "invoke",
]
