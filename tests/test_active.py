import numpy as np
import pytest

from cgp_pkg.cartesian import Expression
from cgp_pkg.cartesian import KernelSet
from cgp_pkg.cartesian.active import resolve_active
from cgp_pkg.cartesian.active import resolve_active_nodes
from cgp_pkg.cartesian.bounds import output_gene_index


def reachable(x, n, m, r, c, arity):
    """Reference reachability by plain depth-first search."""
    found = set()
    stack = [x[output_gene_index(q, r, c, arity)] for q in range(m)]
    while stack:
        node_id = stack.pop()
        if node_id in found:
            continue
        found.add(node_id)
        if node_id >= n:
            block = (node_id - n) * (arity + 1)
            stack.extend(x[block + 1 : block + arity + 1])
    return sorted(found)


def test_single_node_all_active():
    nodes, genes = resolve_active([0, 0, 1, 2], 2, 1, 1, 1, 2)
    assert nodes == [0, 1, 2]
    assert genes == [0, 1, 2, 3]


def test_output_on_input_leaves_node_inactive():
    nodes, genes = resolve_active([0, 0, 0, 0], 2, 1, 1, 1, 2)
    assert nodes == [0]
    assert genes == [3]


def test_grid_active_sets(grid_chromosome, grid_active):
    nodes, genes = resolve_active(grid_chromosome, 2, 2, 2, 3, 2)
    assert (nodes, genes) == grid_active


def test_resolution_is_idempotent(grid_chromosome):
    first = resolve_active(grid_chromosome, 2, 2, 2, 3, 2)
    second = resolve_active(grid_chromosome, 2, 2, 2, 3, 2)
    assert first == second


def test_reconvergent_chain_stays_linear():
    # Each node reads the previous node twice: 2**c paths, c + 1 distinct nodes
    n, m, r, c, arity = 1, 1, 1, 60, 2
    x = []
    for col in range(c):
        prev = n + col - 1 if col > 0 else 0
        x.extend([0, prev, prev])
    x.append(n + c - 1)
    nodes, genes = resolve_active(x, n, m, r, c, arity)
    assert nodes == list(range(n + c))
    assert len(genes) == (arity + 1) * c + m


@pytest.mark.parametrize("seed", range(20))
def test_random_expressions_match_reference(seed):
    n, m, r, c, l, arity = 3, 2, 3, 6, 3, 3
    ex = Expression(n, m, r, c, l, arity, KernelSet(["sum", "mul", "diff"]), seed=seed)
    x = ex.get()

    nodes = ex.get_active_nodes()
    genes = ex.get_active_genes()
    assert nodes == reachable(x, n, m, r, c, arity)
    assert nodes == sorted(set(nodes))
    assert len(genes) >= m
    first_output = output_gene_index(0, r, c, arity)
    assert genes[-m:] == list(range(first_output, first_output + m))

    internal = [i for i in nodes if i >= n]
    assert len(genes) == (arity + 1) * len(internal) + m


def test_numpy_chromosome_is_accepted():
    x = np.array([0, 0, 1, 2])
    assert resolve_active_nodes(x, 2, 1, 1, 1, 2) == [0, 1, 2]
