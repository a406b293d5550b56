"""Dense vectors and matrices of floats with element-wise arithmetic and dot products."""

__version__ = "0.1.0"
__all__ = ["matrix", "vector"]