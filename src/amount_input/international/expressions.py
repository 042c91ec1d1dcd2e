"""Arithmetic entry in amount fields, e.g. "12,50+7*2".

Expressions are parsed with ``ast`` and walked node by node; only numeric
constants, the four basic operators and unary signs are accepted, so
nothing typed into a field is ever executed.
"""
from __future__ import annotations
import ast
import math
import operator
from typing import Callable

from ..models.locale import LocaleProfile
from ..utils.logging import get_logger

logger = get_logger(__name__)

OPERATOR_CHARS = frozenset("+-*/")
MAX_EXPRESSION_LENGTH = 200

BINARY_OPERATORS: dict[type, Callable[[float, float], float]] = {
    ast.Add: operator.add,
    ast.Sub: operator.sub,
    ast.Mult: operator.mul,
    ast.Div: operator.truediv,
}

UNARY_OPERATORS: dict[type, Callable[[float], float]] = {
    ast.UAdd: operator.pos,
    ast.USub: operator.neg,
}


def contains_operator(text: str) -> bool:
    return any(ch in OPERATOR_CHARS for ch in text)


def normalize_expression(text: str, profile: LocaleProfile) -> str:
    """Rewrite locale separators so the text reads as a Python expression."""
    return text.replace(profile.group_separator, "").replace(profile.decimal_separator, ".")


def evaluate_expression(text: str, profile: LocaleProfile) -> float | None:
    """Evaluate *text* as arithmetic, ``None`` if it is not a finite result."""
    expression = normalize_expression(text, profile).strip()
    if not expression or len(expression) > MAX_EXPRESSION_LENGTH:
        return None
    try:
        tree = ast.parse(expression, mode="eval")
        result = _evaluate_node(tree.body)
    except (SyntaxError, ValueError, ZeroDivisionError, OverflowError) as e:
        logger.debug("expression_rejected", expression=expression, error=str(e))
        return None
    if not math.isfinite(result):
        return None
    return result


def _evaluate_node(node: ast.AST) -> float:
    if isinstance(node, ast.Constant) and type(node.value) in (int, float):
        return float(node.value)
    if isinstance(node, ast.BinOp) and type(node.op) in BINARY_OPERATORS:
        return BINARY_OPERATORS[type(node.op)](_evaluate_node(node.left), _evaluate_node(node.right))
    if isinstance(node, ast.UnaryOp) and type(node.op) in UNARY_OPERATORS:
        return UNARY_OPERATORS[type(node.op)](_evaluate_node(node.operand))
    raise ValueError(f"Unsupported expression element: {type(node).__name__}")
