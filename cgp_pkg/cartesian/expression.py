"""CGP expression: chromosome, bounds, active graph and mutations.

This module ties the building blocks of the package together. An
``Expression`` owns a chromosome together with its fixed bounds, its function
set and its random generator, and keeps the active nodes and genes in sync
with the chromosome at all times: every public method either fails without
touching the instance or leaves it in a new consistent state.

Key Classes:
    - Expression: Encoded expression with evaluation and mutation methods
"""

from __future__ import annotations

import numbers
from typing import Any
from typing import Iterable
from typing import Sequence

import numpy as np
import sympy as sp

from ..config import DEFAULT_SEED
from ..config import SYMBOL_PREFIX
from ..logging_config import get_logger
from ..types import Chromosome
from ..types import InvalidChromosomeError
from ..types import InvalidParameterError
from ..utils.formatting import format_expression
from .active import resolve_active
from .bounds import compute_bounds
from .evaluator import evaluate
from .mutation import check_indices
from .mutation import mutate_genes
from .mutation import pick_active_cgene
from .mutation import pick_active_fgene
from .mutation import pick_active_genes
from .mutation import pick_ogene
from .mutation import pick_random_genes
from .mutation import resample_gene
from .validation import is_valid

logger = get_logger("cartesian.expression")


class Expression:
    """A mathematical expression encoded with Cartesian Genetic Programming.

    The expression is a grid of ``r`` rows by ``c`` columns of nodes, each
    applying one of the basis functions in ``kernels`` to ``arity`` earlier
    nodes. Evaluation is generic: the same expression computes floats, numpy
    arrays, SymPy expressions or strings depending on what it is called with.

    Example:
        >>> from cgp_pkg.cartesian import Expression, KernelSet
        >>> ex = Expression(2, 1, 1, 1, 1, 2, KernelSet(["sum"]), seed=0)
        >>> ex.set([0, 0, 1, 2])
        >>> ex([2.0, 3.0])
        [5.0]
        >>> ex(["x", "y"])
        ['(x+y)']
    """

    def __init__(
        self,
        n: int,
        m: int,
        r: int,
        c: int,
        l: int,
        arity: int,
        kernels: Iterable[Any],
        seed: int | None = None,
        rng: np.random.Generator | None = None,
    ):
        """Build a random expression.

        Args:
            n: Number of inputs (independent variables)
            m: Number of outputs (dependent variables)
            r: Number of rows
            c: Number of columns
            l: Number of levels-back allowed
            arity: Arity of the basis functions
            kernels: Function set (a KernelSet or any sequence of callables)
            seed: Seed of the random generator (initial chromosome and
                mutations depend on it)
            rng: Generator to use instead of seeding a new one

        Raises:
            InvalidParameterError: If the topology or the function set is invalid
        """
        self._kernels = list(kernels)
        lb, ub = compute_bounds(n, m, r, c, l, arity, len(self._kernels))
        self._lb = [int(v) for v in lb]
        self._ub = [int(v) for v in ub]
        for kernel in self._kernels:
            kernel_arity = getattr(kernel, "arity", None)
            if kernel_arity is not None and kernel_arity != arity:
                raise InvalidParameterError(
                    f"Kernel '{getattr(kernel, 'name', kernel)}' has arity "
                    f"{kernel_arity}, expression arity is {arity}"
                )

        self._n = int(n)
        self._m = int(m)
        self._r = int(r)
        self._c = int(c)
        self._l = int(l)
        self._arity = int(arity)

        if rng is None:
            rng = np.random.default_rng(seed if seed is not None else DEFAULT_SEED)
        self._rng = rng

        # Random initial expression
        self._x: Chromosome = [
            int(self._rng.integers(low, high, endpoint=True))
            for low, high in zip(self._lb, self._ub)
        ]
        self._active_nodes: list[int] = []
        self._active_genes: list[int] = []
        self._update_active()

        logger.debug(
            "Created expression n=%d m=%d r=%d c=%d l=%d arity=%d with %d kernels",
            self._n, self._m, self._r, self._c, self._l, self._arity,
            len(self._kernels),
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get(self) -> Chromosome:
        """Return a copy of the chromosome."""
        return list(self._x)

    def get_lb(self) -> list[int]:
        return list(self._lb)

    def get_ub(self) -> list[int]:
        return list(self._ub)

    def get_active_nodes(self) -> list[int]:
        """Return the active node ids, sorted ascending (inputs included)."""
        return list(self._active_nodes)

    def get_active_genes(self) -> list[int]:
        """Return the active gene positions; the last ``m`` are the outputs."""
        return list(self._active_genes)

    def get_n(self) -> int:
        return self._n

    def get_m(self) -> int:
        return self._m

    def get_rows(self) -> int:
        return self._r

    def get_cols(self) -> int:
        return self._c

    def get_levels_back(self) -> int:
        return self._l

    def get_arity(self) -> int:
        return self._arity

    def get_f(self) -> list[Any]:
        """Return the function set."""
        return list(self._kernels)

    n = property(get_n)
    m = property(get_m)
    rows = property(get_rows)
    cols = property(get_cols)
    levels_back = property(get_levels_back)
    arity = property(get_arity)
    kernels = property(get_f)

    # ------------------------------------------------------------------
    # Chromosome replacement
    # ------------------------------------------------------------------

    def is_valid(self, x: Sequence[int]) -> bool:
        """Whether ``x`` fits the length and bounds of this expression."""
        return is_valid(x, self._lb, self._ub)

    def set(self, x: Sequence[int]) -> None:
        """Replace the chromosome and update the active sets.

        Raises:
            InvalidChromosomeError: If ``x`` is incompatible with the
                expression; the current chromosome is kept
        """
        if not self.is_valid(x):
            logger.warning("Rejected incompatible chromosome of length %d", len(x))
            raise InvalidChromosomeError("Chromosome is incompatible")
        self._x = [int(gene) for gene in x]
        self._update_active()

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def mutate(self, idx: int | Iterable[int]) -> None:
        """Mutate one gene, or each gene of a list, within its bounds.

        Args:
            idx: Gene position or iterable of gene positions

        Raises:
            GeneIndexError: If any position is out of range (nothing changes)
        """
        if isinstance(idx, numbers.Integral):
            (checked,) = check_indices([idx], len(self._x))
            if resample_gene(self._x, self._lb, self._ub, checked, self._rng):
                self._update_active()
            return
        self._apply(idx)

    def mutate_random(self, N: int = 1) -> None:
        """Mutate ``N`` genes picked uniformly over the whole chromosome."""
        self._apply(pick_random_genes(self._rng, len(self._x), N))

    def mutate_active(self, N: int = 1) -> None:
        """Mutate ``N`` genes picked uniformly among the active genes.

        Function, connection and output genes can all be hit.
        """
        self._apply(pick_active_genes(self._rng, self._active_genes, N))

    def mutate_active_fgene(self) -> None:
        """Mutate the function gene of one active node (no-op if none is active)."""
        idx = pick_active_fgene(self._rng, self._active_genes, self._m, self._arity)
        if idx is not None:
            self.mutate(idx)

    def mutate_active_cgene(self) -> None:
        """Mutate one connection gene of an active node (no-op if none is active)."""
        idx = pick_active_cgene(self._rng, self._active_genes, self._m, self._arity)
        if idx is not None:
            self.mutate(idx)

    def mutate_ogene(self) -> None:
        """Mutate one of the output genes."""
        self.mutate(pick_ogene(self._rng, self._active_genes, self._m))

    def _apply(self, idxs: Iterable[int]) -> None:
        idxs = list(idxs)
        if mutate_genes(self._x, self._lb, self._ub, idxs, self._rng):
            logger.debug("Mutated genes %s", idxs)
            self._update_active()

    def _update_active(self) -> None:
        self._active_nodes, self._active_genes = resolve_active(
            self._x, self._n, self._m, self._r, self._c, self._arity
        )

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def __call__(self, inputs: Sequence[Any]) -> list[Any]:
        """Evaluate the expression.

        Args:
            inputs: ``n`` values: floats, numpy arrays, SymPy expressions or
                strings (any type the kernels accept)

        Returns:
            List of the ``m`` output values

        Raises:
            InputSizeError: If ``len(inputs) != n``
        """
        return evaluate(
            self._x,
            self._active_nodes,
            self._kernels,
            list(inputs),
            self._n,
            self._m,
            self._r,
            self._c,
            self._arity,
        )

    def symbolic(self, names: Sequence[str] | None = None) -> list[sp.Expr]:
        """Evaluate the expression on SymPy symbols.

        Args:
            names: One symbol name per input (default: x0, x1, ...)

        Returns:
            List of ``m`` SymPy expressions
        """
        if names is None:
            names = [f"{SYMBOL_PREFIX}{i}" for i in range(self._n)]
        symbols = [sp.Symbol(name) for name in names]
        return self(symbols)

    def simplify(self, names: Sequence[str] | None = None) -> list[sp.Expr]:
        """Return the simplified symbolic form of each output."""
        return [sp.simplify(expr) for expr in self.symbolic(names)]

    def copy(self) -> Expression:
        """Return an independent expression with the same chromosome.

        The copy draws from a child stream of this expression's generator.
        """
        clone = Expression(
            self._n,
            self._m,
            self._r,
            self._c,
            self._l,
            self._arity,
            self._kernels,
            rng=self._rng.spawn(1)[0],
        )
        clone.set(self._x)
        return clone

    def __str__(self) -> str:
        return format_expression(self)

    def __repr__(self) -> str:
        return (
            f"Expression(n={self._n}, m={self._m}, r={self._r}, c={self._c}, "
            f"l={self._l}, arity={self._arity}, x={self._x})"
        )
