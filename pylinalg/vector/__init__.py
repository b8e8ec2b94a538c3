"""
Vector module.

Public API:
    Vector(elements)  - Fixed-dimension vector with add, dot, cross,
                        scalar and inverse
"""

from pylinalg.vector.vector import Vector, CROSS_DIMS

__all__ = [
    "Vector",
    "CROSS_DIMS",
]
