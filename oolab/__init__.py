"""Object-oriented exercises: a parallelogram, an icosahedron and small vector types."""

__version__ = "0.1.0"