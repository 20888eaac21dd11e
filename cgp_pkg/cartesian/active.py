"""Decoding of the active part of a CGP chromosome.

Only nodes reachable backward from the output genes influence the result of an
expression. They are found with a layered breadth-first walk: each layer is
deduplicated before it is expanded, so reconvergent graphs (the common case)
cost time proportional to the number of distinct active nodes rather than to
the number of paths through the graph.
"""

from __future__ import annotations

from typing import Sequence

from .bounds import node_gene_index
from .bounds import output_gene_index


def resolve_active_nodes(
    x: Sequence[int], n: int, m: int, r: int, c: int, arity: int
) -> list[int]:
    """Return the sorted, duplicate-free ids of the nodes feeding the outputs.

    Args:
        x: Chromosome
        n: Number of inputs
        m: Number of outputs
        r: Number of rows
        c: Number of columns
        arity: Arity of the basis functions

    Returns:
        Active node ids in ascending order (inputs included)
    """
    first_output = output_gene_index(0, r, c, arity)
    current = [x[first_output + q] for q in range(m)]
    seen: set[int] = set()

    while current:
        seen.update(current)
        following: list[int] = []
        for node_id in current:
            # Inputs are terminals
            if node_id >= n:
                block = node_gene_index(node_id, n, arity)
                following.extend(x[block + 1 : block + arity + 1])
        # Nodes already expanded in an earlier layer need no second visit
        current = sorted(set(following) - seen)

    return sorted(seen)


def resolve_active_genes(
    active_nodes: Sequence[int], n: int, m: int, r: int, c: int, arity: int
) -> list[int]:
    """Return the chromosome positions needed to reproduce the active graph.

    Every gene of every active internal node is included, in node order,
    followed by all ``m`` output genes.
    """
    genes: list[int] = []
    for node_id in active_nodes:
        if node_id >= n:
            block = node_gene_index(node_id, n, arity)
            genes.extend(range(block, block + arity + 1))

    first_output = output_gene_index(0, r, c, arity)
    genes.extend(range(first_output, first_output + m))
    return genes


def resolve_active(
    x: Sequence[int], n: int, m: int, r: int, c: int, arity: int
) -> tuple[list[int], list[int]]:
    """Compute both active sets of a chromosome.

    Returns:
        Tuple of (active_nodes, active_genes)
    """
    nodes = resolve_active_nodes(x, n, m, r, c, arity)
    genes = resolve_active_genes(nodes, n, m, r, c, arity)
    return nodes, genes
