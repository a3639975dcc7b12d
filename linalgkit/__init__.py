"""Pure-Python vectors, matrices, inverses, QR decomposition and a self check."""

__version__ = "0.1.0"
__all__ = ["vector", "matrix", "decompositions", "selfcheck"]