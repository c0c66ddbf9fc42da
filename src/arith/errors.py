"""
Error types for arith evaluation and configuration.

Lexing and parsing never raise: malformed input is reported as
diagnostics on the resulting syntax tree. The exceptions below cover the
failures that have no sensible recovery.
"""


class ArithError(Exception):
    """Base exception for all arith errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class EvaluationError(ArithError):
    """
    Raised when a syntax tree cannot be reduced to a number.

    Subclasses distinguish the failure kind so callers can tell an
    arithmetic fault from a tree the evaluator does not understand.
    """

    pass


class DivisionByZeroError(EvaluationError, ZeroDivisionError):
    """
    Raised when the right operand of a division evaluates to zero.

    Also a built-in ``ArithmeticError``, so callers catching the standard
    arithmetic hierarchy see it too.
    """

    pass


class UnsupportedOperationError(EvaluationError):
    """
    Raised for an operator kind or node variant the evaluator does not handle.

    Trees produced by the parser never trigger it; hand-built trees can.
    """

    pass


class ConfigError(ArithError):
    """Raised when ``arith.toml`` cannot be read or has wrong value types."""

    pass
