import pytest

from cgp_pkg.cartesian import Expression
from cgp_pkg.cartesian import KernelSet

# n=2, m=2, r=2, c=3, l=2, arity=2 with kernels sum (0), diff (1), mul (2).
#
#   node 2 = x0 + x1          genes 0-2
#   node 3 = x1 - x0          genes 3-5
#   node 4 = node2 * node3    genes 6-8
#   node 5 (inactive)         genes 9-11
#   node 6 = node4 * node2    genes 12-14
#   node 7 (inactive)         genes 15-17
#   outputs: node 6, node 4   genes 18-19
GRID_CHROMOSOME = [0, 0, 1, 1, 1, 0, 2, 2, 3, 0, 1, 1, 2, 4, 2, 0, 5, 5, 6, 4]
GRID_ACTIVE_NODES = [0, 1, 2, 3, 4, 6]
GRID_ACTIVE_GENES = [0, 1, 2, 3, 4, 5, 6, 7, 8, 12, 13, 14, 18, 19]


@pytest.fixture
def grid_expression():
    ex = Expression(2, 2, 2, 3, 2, 2, KernelSet(["sum", "diff", "mul"]), seed=42)
    ex.set(GRID_CHROMOSOME)
    return ex


@pytest.fixture
def add_kernels():
    return KernelSet(["sum"])


@pytest.fixture
def grid_chromosome():
    return list(GRID_CHROMOSOME)


@pytest.fixture
def grid_active():
    return list(GRID_ACTIVE_NODES), list(GRID_ACTIVE_GENES)
