"""
PyLinalg: small generic linear algebra for Python.

Vector and matrix arithmetic over signed integer and floating point
scalars, with PLU decomposition and determinants.

Submodules:
    vector: Vector arithmetic (add, dot, cross, scalar, inverse)
    matrix: Matrix arithmetic and PLU decomposition
    core: Exceptions, validation, scalar capabilities, tolerances
"""

__version__ = "0.1.0"

from pylinalg import vector
from pylinalg import matrix
from pylinalg.vector import Vector
from pylinalg.matrix import Matrix, LUPDecomposed, lup, det

__all__ = [
    "__version__",
    "vector",
    "matrix",
    "Vector",
    "Matrix",
    "LUPDecomposed",
    "lup",
    "det",
]
