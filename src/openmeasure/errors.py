# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Exception hierarchy for OpenMeasure.

Delivery failures are deliberately absent: channels report them as a
:class:`~openmeasure.channels.DeliveryResult` value.  Likewise there is no
"unsupported capability" error; see :mod:`openmeasure.capabilities`.
"""

from __future__ import annotations


class OpenMeasureError(Exception):
    """Base class for errors raised by OpenMeasure."""


class ConstructionError(OpenMeasureError, ValueError):
    """A variant was created with invalid state (e.g. a negative dimension)."""


class RegistryError(OpenMeasureError, TypeError):
    """An absent or non-computable element was offered to a registry."""


class MeasureError(OpenMeasureError, ArithmeticError):
    """A variant produced a negative or non-finite measure."""


class WiringError(OpenMeasureError, LookupError):
    """Configuration referenced a variant, channel, or formatter that is not registered."""


__all__ = [
    "OpenMeasureError",
    "ConstructionError",
    "RegistryError",
    "MeasureError",
    "WiringError",
]
