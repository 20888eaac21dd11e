"""Cartesian Genetic Programming Module.

This module encodes mathematical expressions as fixed-length integer
chromosomes, decodes the part of the graph that reaches the outputs, evaluates
it over numeric, symbolic or textual values and mutates it for use in an
evolutionary loop.

Main Components:
    - Expression: Chromosome, bounds, active graph, evaluation and mutation
    - Kernel / KernelSet: Basis functions and function sets
    - compute_bounds / resolve_active / evaluate: The underlying building blocks

Example:
    >>> from cgp_pkg.cartesian import Expression, KernelSet
    >>> ex = Expression(1, 1, 2, 4, 4, 2, KernelSet(["sum", "mul", "sin"]), seed=3)
    >>> ex.mutate_active(2)
    >>> print(ex(["x"]))
    >>> print(ex.simplify(["x"]))
"""

from .active import resolve_active
from .active import resolve_active_genes
from .active import resolve_active_nodes
from .bounds import check_topology
from .bounds import chromosome_length
from .bounds import compute_bounds
from .evaluator import evaluate
from .expression import Expression
from .kernels import BUILTIN_KERNELS
from .kernels import Kernel
from .kernels import KernelSet
from .kernels import get_kernel
from .mutation import mutate_genes
from .mutation import pick_active_cgene
from .mutation import pick_active_fgene
from .mutation import pick_active_genes
from .mutation import pick_ogene
from .mutation import pick_random_genes
from .mutation import resample_gene
from .validation import is_valid

__all__ = [
    # Expression
    "Expression",
    # Kernels
    "Kernel",
    "KernelSet",
    "BUILTIN_KERNELS",
    "get_kernel",
    # Building blocks
    "check_topology",
    "chromosome_length",
    "compute_bounds",
    "is_valid",
    "resolve_active",
    "resolve_active_nodes",
    "resolve_active_genes",
    "evaluate",
    # Mutation operators
    "resample_gene",
    "mutate_genes",
    "pick_random_genes",
    "pick_active_genes",
    "pick_active_fgene",
    "pick_active_cgene",
    "pick_ogene",
]
