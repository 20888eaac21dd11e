"""Chromosome validation against gene bounds."""

from __future__ import annotations

import numbers
from typing import Sequence


def is_valid(x: Sequence[int], lb: Sequence[int], ub: Sequence[int]) -> bool:
    """Check a chromosome against the bounds of an expression.

    Args:
        x: Candidate chromosome
        lb: Lower bound of each gene
        ub: Upper bound of each gene

    Returns:
        True if ``x`` has the right length and every gene is an integer
        within ``[lb[i], ub[i]]``
    """
    if len(x) != len(lb):
        return False

    for gene, low, high in zip(x, lb, ub):
        # bool is an Integral but never a meaningful gene
        if not isinstance(gene, numbers.Integral) or isinstance(gene, bool):
            return False
        if gene < low or gene > high:
            return False
    return True
