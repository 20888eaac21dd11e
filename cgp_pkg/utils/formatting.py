"""Human-readable rendering of CGP expressions."""

from __future__ import annotations

from typing import Any
from typing import Sequence

from ..config import STREAM_MAX_LENGTH


def format_list(values: Sequence[Any], max_length: int | None = None) -> str:
    """Format a list, truncating long ones.

    Lists longer than ``max_length`` show their first ``max_length`` entries
    followed by ``...``, e.g. ``[0, 1, 2, 3, 4, ... ]``.
    """
    if max_length is None:
        max_length = STREAM_MAX_LENGTH
    items = [str(v) for v in values]
    if len(items) <= max_length:
        return "[" + ", ".join(items) + "]"
    return "[" + "".join(f"{item}, " for item in items[:max_length]) + "... ]"


def format_expression(expression: Any, max_length: int | None = None) -> str:
    """Render every field of an expression as a multi-line report.

    Args:
        expression: A ``cgp_pkg.cartesian.Expression``
        max_length: List truncation length (default: CGP_STREAM_MAX_LENGTH)

    Returns:
        The report, one field per line
    """

    def fmt(values):
        return format_list(values, max_length)

    lines = [
        "CGP Expression:",
        f"\tNumber of inputs:\t\t{expression.n}",
        f"\tNumber of outputs:\t\t{expression.m}",
        f"\tNumber of rows:\t\t\t{expression.rows}",
        f"\tNumber of columns:\t\t{expression.cols}",
        f"\tNumber of levels-back allowed:\t{expression.levels_back}",
        f"\tBasis function arity:\t\t{expression.arity}",
        "",
        f"\tResulting lower bounds:\t{fmt(expression.get_lb())}",
        f"\tResulting upper bounds:\t{fmt(expression.get_ub())}",
        "",
        f"\tCurrent expression (encoded):\t{fmt(expression.get())}",
        f"\tActive nodes:\t\t\t{fmt(expression.get_active_nodes())}",
        f"\tActive genes:\t\t\t{fmt(expression.get_active_genes())}",
        "",
        f"\tFunction set:\t\t\t{fmt([getattr(k, 'name', k) for k in expression.kernels])}",
    ]
    return "\n".join(lines) + "\n"
