"""
arith - integer arithmetic expressions: lexer, parser and evaluator.

Usage:
    from arith import SyntaxTree, evaluate

    tree = SyntaxTree.parse("(2 + 3) * 4")
    if not tree.diagnostics:
        evaluate(tree.root)  # 20
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _metadata_version

from .errors import (
    ArithError,
    ConfigError,
    DivisionByZeroError,
    EvaluationError,
    UnsupportedOperationError,
)
from .evaluator import Evaluator, evaluate
from .syntax import SyntaxTree

try:
    __version__ = _metadata_version("arith")
except PackageNotFoundError:
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "ArithError",
    "ConfigError",
    "DivisionByZeroError",
    "EvaluationError",
    "Evaluator",
    "SyntaxTree",
    "UnsupportedOperationError",
    "evaluate",
]
