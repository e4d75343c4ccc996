"""Application layer: pattern compilation and evaluation."""

from moenster.application.compiler import compile_directives
from moenster.application.evaluator import evaluate

__all__ = [
    "compile_directives",
    "evaluate",
]
