import numpy as np
import pytest

from cgp_pkg.cartesian.bounds import compute_bounds
from cgp_pkg.cartesian.validation import is_valid

LB, UB = compute_bounds(2, 2, 2, 3, 2, 2, 3)


def test_accepts_chromosome_within_bounds(grid_chromosome):
    assert is_valid(grid_chromosome, LB, UB)


def test_accepts_bounds_themselves():
    assert is_valid(LB, LB, UB)
    assert is_valid(UB, LB, UB)


def test_accepts_numpy_integers(grid_chromosome):
    assert is_valid(np.array(grid_chromosome), LB, UB)


@pytest.mark.parametrize("length_delta", [-1, 1])
def test_rejects_wrong_length(grid_chromosome, length_delta):
    if length_delta < 0:
        x = grid_chromosome[:-1]
    else:
        x = grid_chromosome + [4]
    assert not is_valid(x, LB, UB)


def test_rejects_empty():
    assert not is_valid([], LB, UB)


@pytest.mark.parametrize("idx", [0, 1, 13, 18])
def test_rejects_gene_above_upper_bound(grid_chromosome, idx):
    grid_chromosome[idx] = UB[idx] + 1
    assert not is_valid(grid_chromosome, LB, UB)


@pytest.mark.parametrize("idx", [13, 14, 18, 19])
def test_rejects_gene_below_lower_bound(grid_chromosome, idx):
    grid_chromosome[idx] = LB[idx] - 1
    assert not is_valid(grid_chromosome, LB, UB)


@pytest.mark.parametrize("bad", [1.0, "1", None, True])
def test_rejects_non_integer_genes(grid_chromosome, bad):
    grid_chromosome[1] = bad
    assert not is_valid(grid_chromosome, LB, UB)
