"""Mutation operators for CGP chromosomes.

This module implements the point mutations used by an evolutionary loop:
- Gene resampling: draw a new value for a gene, always different from the old one
- Random mutation: resample genes picked anywhere in the chromosome
- Active mutation: resample genes picked among the active ones
- Function / connection gene mutation: target one active node
- Output gene mutation: redirect one output

The pickers only choose gene positions; :func:`mutate_genes` changes the
chromosome in place. Recomputing the active sets is left to the caller so that
a batch of changes costs a single decode.
"""

from __future__ import annotations

import numbers
from typing import Iterable
from typing import Sequence

import numpy as np

from ..types import GeneIndexError


def check_indices(idxs: Iterable[int], length: int) -> list[int]:
    """Validate gene positions before any of them is touched.

    Raises:
        GeneIndexError: If any index is not an integer or falls outside
            ``[0, length)``
    """
    checked = []
    for idx in idxs:
        # bool is an Integral but never a meaningful position
        if not isinstance(idx, numbers.Integral) or isinstance(idx, bool):
            raise GeneIndexError(
                f"idx of gene to be mutated is not an integer: {idx!r}"
            )
        idx = int(idx)
        if idx < 0 or idx >= length:
            raise GeneIndexError(
                f"idx of gene to be mutated is out of bounds: {idx} "
                f"(chromosome length {length})"
            )
        checked.append(idx)
    return checked


def resample_gene(
    x: list[int],
    lb: Sequence[int],
    ub: Sequence[int],
    idx: int,
    rng: np.random.Generator,
) -> bool:
    """Resample gene ``idx`` uniformly in its bounds, rejecting the old value.

    Args:
        x: Chromosome (modified in place)
        lb: Lower bounds
        ub: Upper bounds
        idx: Gene position (assumed valid)
        rng: Random generator

    Returns:
        True if the gene changed. Genes with ``lb == ub`` admit a single value
        and are left alone.
    """
    if lb[idx] >= ub[idx]:
        return False

    new_value = x[idx]
    while new_value == x[idx]:
        new_value = int(rng.integers(lb[idx], ub[idx], endpoint=True))
    x[idx] = new_value
    return True


def mutate_genes(
    x: list[int],
    lb: Sequence[int],
    ub: Sequence[int],
    idxs: Iterable[int],
    rng: np.random.Generator,
) -> bool:
    """Resample every listed gene.

    All indices are validated first, so a rejected call leaves ``x`` untouched.

    Returns:
        True if at least one gene changed

    Raises:
        GeneIndexError: If any index is out of range
    """
    checked = check_indices(idxs, len(x))
    changed = False
    for idx in checked:
        changed |= resample_gene(x, lb, ub, idx, rng)
    return changed


def _check_count(N: int) -> int:
    if N < 0:
        raise ValueError(f"Number of genes to mutate must be non-negative, got {N}")
    return int(N)


def pick_random_genes(rng: np.random.Generator, length: int, N: int) -> list[int]:
    """Pick ``N`` gene positions uniformly over the chromosome, with replacement."""
    N = _check_count(N)
    return [int(i) for i in rng.integers(0, length, size=N)]


def pick_active_genes(
    rng: np.random.Generator, active_genes: Sequence[int], N: int
) -> list[int]:
    """Pick ``N`` gene positions uniformly among the active genes, with replacement."""
    N = _check_count(N)
    picks = rng.integers(0, len(active_genes), size=N)
    return [active_genes[int(i)] for i in picks]


def _pick_active_block(
    rng: np.random.Generator, active_genes: Sequence[int], m: int, arity: int
) -> int | None:
    # The last m active genes are the outputs; anything before belongs to a node
    if len(active_genes) <= m:
        return None
    idx = active_genes[int(rng.integers(0, len(active_genes) - m))]
    return idx - (idx % (arity + 1))


def pick_active_fgene(
    rng: np.random.Generator, active_genes: Sequence[int], m: int, arity: int
) -> int | None:
    """Pick the function gene of a random active node.

    Returns:
        Gene position, or None when no internal node is active
    """
    return _pick_active_block(rng, active_genes, m, arity)


def pick_active_cgene(
    rng: np.random.Generator, active_genes: Sequence[int], m: int, arity: int
) -> int | None:
    """Pick one connection gene of a random active node.

    Returns:
        Gene position, or None when no internal node is active
    """
    block = _pick_active_block(rng, active_genes, m, arity)
    if block is None:
        return None
    return block + int(rng.integers(1, arity, endpoint=True))


def pick_ogene(rng: np.random.Generator, active_genes: Sequence[int], m: int) -> int:
    """Pick one of the ``m`` output genes."""
    if m > 1:
        pos = int(rng.integers(len(active_genes) - m, len(active_genes)))
    else:
        pos = len(active_genes) - 1
    return active_genes[pos]
