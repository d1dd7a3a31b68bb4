"""Classroom tools: student roster, pass/fail review, grade table and LSB text hiding."""

__version__ = "0.1.0"
__all__ = ["__version__"]