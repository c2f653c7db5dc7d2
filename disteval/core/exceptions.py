"""
Custom exceptions for disteval.
"""


class DistEvalError(Exception):
    """Base exception for disteval."""
    pass


class ConfigurationError(DistEvalError):
    """Malformed or unsupported construction-time configuration."""
    pass


class InvalidOperandError(DistEvalError):
    """Operand has the wrong shape, type or nullness for the call."""
    pass


class DimensionMismatchError(InvalidOperandError):
    """Vector operands have different lengths."""
    pass
