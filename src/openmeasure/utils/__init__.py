# ==============================================================================
#                  © 2025 Dedalus Labs, Inc. and affiliates
#                            Licensed under MIT
#             github.com/dedalus-labs/openmeasure-python/LICENSE
# ==============================================================================

"""Utility helpers for OpenMeasure."""

from __future__ import annotations

from .logger import get_logger, setup_logger


__all__ = ["get_logger", "setup_logger"]
