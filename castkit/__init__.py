"""Scalar literal conversion, object handle serialization and type identification."""

__version__ = "0.1.0"
__all__ = ["converter", "serialization", "identify"]