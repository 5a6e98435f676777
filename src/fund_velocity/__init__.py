"""Fund load velocity limit evaluator."""

__version__ = "0.1.0"
