# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#               github.com/dedalus-labs/solidcap-python/LICENSE
# ==============================================================================

"""Registry shared by the principle examples."""

from __future__ import annotations

from ..registry import CapabilityRegistry


catalog = CapabilityRegistry("principles")


__all__ = ["catalog"]
