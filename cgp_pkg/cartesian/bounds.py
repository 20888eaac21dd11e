"""Gene bounds for a Cartesian Genetic Programming chromosome.

The chromosome holds one block of ``arity + 1`` genes per internal node
(function gene followed by ``arity`` connection genes), laid out column-major,
followed by ``m`` output genes. The bounds computed here are fixed for the
lifetime of an expression and encode the grid constraints: a node may only
connect to inputs or to nodes in strictly earlier columns, within the
levels-back window.
"""

from __future__ import annotations

import numbers

from ..types import InvalidParameterError


def check_topology(
    n: int, m: int, r: int, c: int, l: int, arity: int, function_count: int
) -> None:
    """Validate topology parameters.

    Raises:
        InvalidParameterError: If any dimension is zero, arity is below 2 or
            the function set is empty
    """
    for name, value in (
        ("n", n), ("m", m), ("r", r), ("c", c), ("l", l), ("arity", arity)
    ):
        if not isinstance(value, numbers.Integral) or isinstance(value, bool) or value < 0:
            raise InvalidParameterError(
                f"{name} must be a non-negative integer, got {value!r}"
            )

    if n == 0:
        raise InvalidParameterError("Number of inputs is 0")
    if m == 0:
        raise InvalidParameterError("Number of outputs is 0")
    if c == 0:
        raise InvalidParameterError("Number of columns is 0")
    if r == 0:
        raise InvalidParameterError("Number of rows is 0")
    if l == 0:
        raise InvalidParameterError("Number of level-backs is 0")
    if arity < 2:
        raise InvalidParameterError("Basis functions arity must be at least 2")
    if function_count == 0:
        raise InvalidParameterError("Number of basis functions is 0")


def chromosome_length(m: int, r: int, c: int, arity: int) -> int:
    """Total number of genes: one block per internal node plus the outputs."""
    return (arity + 1) * r * c + m


def node_gene_index(node_id: int, n: int, arity: int) -> int:
    """Position of the function gene of internal node ``node_id``."""
    return (node_id - n) * (arity + 1)


def output_gene_index(q: int, r: int, c: int, arity: int) -> int:
    """Position of the ``q``-th output gene."""
    return (arity + 1) * r * c + q


def compute_bounds(
    n: int, m: int, r: int, c: int, l: int, arity: int, function_count: int
) -> tuple[list[int], list[int]]:
    """Compute per-gene lower and upper bounds.

    Args:
        n: Number of inputs
        m: Number of outputs
        r: Number of rows
        c: Number of columns
        l: Levels-back
        arity: Arity of the basis functions
        function_count: Size of the function set

    Returns:
        Tuple of (lb, ub), each of length ``(arity + 1) * r * c + m``

    Raises:
        InvalidParameterError: If the topology is invalid
    """
    check_topology(n, m, r, c, l, arity, function_count)

    length = chromosome_length(m, r, c, arity)
    lb = [0] * length
    ub = [0] * length

    # Function genes
    for i in range(0, (arity + 1) * r * c, arity + 1):
        ub[i] = function_count - 1

    # Output genes
    for i in range((arity + 1) * r * c, length):
        ub[i] = n + r * c - 1
        if l <= c:
            lb[i] = n + r * (c - l)

    # Connection genes: column i may see inputs and columns [i - l, i - 1]
    for i in range(c):
        for j in range(r):
            block = ((i * r) + j) * (arity + 1)
            for k in range(1, arity + 1):
                ub[block + k] = n + i * r - 1
                if i >= l:
                    lb[block + k] = n + r * (i - l)

    return lb, ub
