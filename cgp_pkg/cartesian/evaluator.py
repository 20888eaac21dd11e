"""Forward evaluation of the active graph of a CGP chromosome.

The evaluator is generic over the value type: it never performs arithmetic
itself, it only routes values between the basis functions. Anything the
kernels accept works, e.g. floats, numpy arrays, SymPy expressions or strings.
"""

from __future__ import annotations

from typing import Any
from typing import Callable
from typing import Sequence

from ..types import InputSizeError
from .bounds import node_gene_index
from .bounds import output_gene_index


def evaluate(
    x: Sequence[int],
    active_nodes: Sequence[int],
    kernels: Sequence[Callable[[Sequence[Any]], Any]],
    inputs: Sequence[Any],
    n: int,
    m: int,
    r: int,
    c: int,
    arity: int,
) -> list[Any]:
    """Evaluate an expression on the given inputs.

    Args:
        x: Chromosome
        active_nodes: Sorted active node ids of ``x``
        kernels: Function set, indexed by function gene
        inputs: One value per input node
        n: Number of inputs
        m: Number of outputs
        r: Number of rows
        c: Number of columns
        arity: Arity of the basis functions

    Returns:
        List of ``m`` output values

    Raises:
        InputSizeError: If ``len(inputs) != n``
    """
    if len(inputs) != n:
        raise InputSizeError(
            f"Input size is incompatible: expected {n}, got {len(inputs)}"
        )

    # Dense table indexed by node id. Ascending ids respect column order, so
    # every predecessor is filled in before it is read.
    node: list[Any] = [None] * (n + r * c)
    for i in active_nodes:
        if i < n:
            node[i] = inputs[i]
        else:
            block = node_gene_index(i, n, arity)
            function_in = [node[x[block + j + 1]] for j in range(arity)]
            node[i] = kernels[x[block]](function_in)

    first_output = output_gene_index(0, r, c, arity)
    return [node[x[first_output + q]] for q in range(m)]
