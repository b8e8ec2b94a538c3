"""
Tolerance tiers for numerical comparison.

Defines precision expectations for different scalar types:
- Integers: exact equality
- FP64: near machine precision
- FP32: relaxed for single-precision arithmetic

Used by Matrix.isclose, LUPDecomposed.reconstructs and the test suite.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integer arithmetic is exact
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact equality for integer scalars',
)

# Double precision
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, partial pivoting',
)

# Single precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision, partial pivoting',
)


def select_tolerance(dtype: Any) -> ToleranceTier:
    """Select appropriate tolerance tier for a given dtype."""
    dt = np.dtype(dtype)
    if dt.kind != 'f':
        return EXACT
    if dt.itemsize < 8:
        return FP32
    return FP64
