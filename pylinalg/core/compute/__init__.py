"""
Shared compute infrastructure for PyLinalg.

IMPORTANT: This is NOT where vector or matrix operations live. This module
contains shared NUMERIC infrastructure.

Submodules:
    tolerances: Tolerance tiers for approximate comparison
"""

from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    FP32,
    select_tolerance,
)

__all__ = [
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "select_tolerance",
]
