"""Basis functions (kernels) for CGP expressions.

A kernel is called with the list of values feeding a node and returns the
node's value. The built-in kernels are n-ary and polymorphic over the value
type:

- floats and numpy arrays use the numpy implementation (vectorised)
- SymPy expressions use the SymPy implementation, so outputs can be
  differentiated or expanded in Taylor series
- strings use the textual renderer, producing a readable formula

Key Classes:
    - Kernel: A named basis function with optional fixed arity
    - KernelSet: An ordered function set built from kernel names
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
from typing import Callable
from typing import Iterable
from typing import Sequence

import numpy as np
import sympy as sp


def _is_text(values: Sequence[Any]) -> bool:
    return len(values) > 0 and all(isinstance(v, str) for v in values)


def _is_symbolic(values: Sequence[Any]) -> bool:
    return any(isinstance(v, sp.Basic) for v in values)


def _fold_sum(values):
    retval = values[0]
    for v in values[1:]:
        retval = retval + v
    return retval


def _fold_diff(values):
    retval = values[0]
    for v in values[1:]:
        retval = retval - v
    return retval


def _fold_mul(values):
    retval = values[0]
    for v in values[1:]:
        retval = retval * v
    return retval


def _fold_div(values):
    retval = values[0]
    for v in values[1:]:
        retval = retval / v
    return retval


def _fold_with(op, values):
    retval = values[0]
    for v in values[1:]:
        retval = op(retval, v)
    return retval


def safe_pdiv(values):
    # Protected division: a zero denominator yields 1
    retval = values[0]
    for v in values[1:]:
        with np.errstate(divide="ignore", invalid="ignore"):
            retval = np.where(v == 0, 1.0, retval / np.where(v == 0, 1.0, v))
    if np.ndim(retval) == 0:
        # Unwrap to a scalar of the same dtype, complex results included
        return np.asarray(retval)[()]
    return retval


def safe_log(x):
    # Use scimath.log (handles negative inputs -> complex)
    # Zero is nudged to 1e-10 so log never returns -inf
    safe_x = np.where(x == 0, 1e-10, x)
    return np.lib.scimath.log(safe_x)


def safe_sqrt(x):
    return np.lib.scimath.sqrt(x)


def sigmoid(x):
    return 1.0 / (1.0 + np.exp(-x))


# Kernels applied to the sum of their inputs
NUMPY_UNARY: dict[str, Callable] = {
    "sig": sigmoid,
    "sin": np.sin,
    "cos": np.cos,
    "tanh": np.tanh,
    "log": safe_log,
    "exp": np.exp,
    "sqrt": safe_sqrt,
}

SYMPY_UNARY: dict[str, Callable] = {
    "sig": lambda x: 1 / (1 + sp.exp(-x)),
    "sin": sp.sin,
    "cos": sp.cos,
    "tanh": sp.tanh,
    "log": sp.log,
    "exp": sp.exp,
    "sqrt": sp.sqrt,
}

# Kernels folding their inputs left to right
NUMPY_NARY: dict[str, Callable] = {
    "sum": _fold_sum,
    "diff": _fold_diff,
    "mul": _fold_mul,
    "div": _fold_div,
    "pdiv": safe_pdiv,
    "max": lambda values: _fold_with(np.maximum, values),
    "min": lambda values: _fold_with(np.minimum, values),
}

SYMPY_NARY: dict[str, Callable] = {
    "sum": _fold_sum,
    "diff": _fold_diff,
    "mul": _fold_mul,
    "div": _fold_div,
    "pdiv": _fold_div,
    "max": lambda values: sp.Max(*values),
    "min": lambda values: sp.Min(*values),
}

INFIX_SYMBOLS: dict[str, str] = {
    "sum": "+",
    "diff": "-",
    "mul": "*",
    "div": "/",
    "pdiv": "/",
}


def render_infix(symbol: str) -> Callable[[Sequence[str]], str]:
    """Renderer producing ``(a<symbol>b<symbol>c)``."""

    def _render(values: Sequence[str]) -> str:
        return "(" + symbol.join(values) + ")"

    return _render


def render_call(name: str) -> Callable[[Sequence[str]], str]:
    """Renderer producing ``name(a+b+c)`` for kernels applied to a sum."""

    def _render(values: Sequence[str]) -> str:
        return f"{name}(" + "+".join(values) + ")"

    return _render


def render_args(name: str) -> Callable[[Sequence[str]], str]:
    """Renderer producing ``name(a, b, c)``."""

    def _render(values: Sequence[str]) -> str:
        return f"{name}(" + ", ".join(values) + ")"

    return _render


@dataclass(frozen=True)
class Kernel:
    """A named basis function.

    Attributes:
        name: Name used in function sets and renderings
        function: Called with the list of input values for numeric and
            symbolic (SymPy) value types
        printer: Called with the list of input strings to render the node as
            text. Defaults to ``name(a, b, ...)``
        arity: Number of inputs the kernel requires, or None when it accepts
            any number
    """

    name: str
    function: Callable[[Sequence[Any]], Any]
    printer: Callable[[Sequence[str]], str] | None = None
    arity: int | None = None

    def __call__(self, values: Sequence[Any]) -> Any:
        if self.arity is not None and len(values) != self.arity:
            raise ValueError(
                f"Kernel '{self.name}' expects {self.arity} inputs, got {len(values)}"
            )
        if _is_text(values):
            return self.render(values)
        return self.function(values)

    def render(self, values: Sequence[str]) -> str:
        """Render the kernel applied to textual inputs."""
        if self.printer is None:
            return render_args(self.name)(values)
        return self.printer(values)

    def __str__(self) -> str:
        return self.name


def _builtin_nary(name: str) -> Kernel:
    numeric = NUMPY_NARY[name]
    symbolic = SYMPY_NARY[name]

    def _function(values):
        if _is_symbolic(values):
            return symbolic(list(values))
        return numeric(list(values))

    if name in INFIX_SYMBOLS:
        printer = render_infix(INFIX_SYMBOLS[name])
    else:
        printer = render_args(name)
    return Kernel(name=name, function=_function, printer=printer)


def _builtin_unary(name: str) -> Kernel:
    numeric = NUMPY_UNARY[name]
    symbolic = SYMPY_UNARY[name]

    def _function(values):
        total = _fold_sum(list(values))
        if _is_symbolic(values):
            return symbolic(total)
        return numeric(total)

    return Kernel(name=name, function=_function, printer=render_call(name))


BUILTIN_KERNELS: dict[str, Kernel] = {
    **{name: _builtin_nary(name) for name in NUMPY_NARY},
    **{name: _builtin_unary(name) for name in NUMPY_UNARY},
}


def get_kernel(name: str) -> Kernel:
    """Look up a built-in kernel by name.

    Raises:
        ValueError: If no kernel has that name
    """
    kernel = BUILTIN_KERNELS.get(name)
    if kernel is None:
        raise ValueError(
            f"Unknown kernel: {name}. Available: {', '.join(BUILTIN_KERNELS)}"
        )
    return kernel


class KernelSet:
    """An ordered function set.

    The position of a kernel in the set is the value of the function gene
    selecting it.

    Example:
        >>> ks = KernelSet(["sum", "mul", "sin"])
        >>> ks[0]([1.0, 2.0])
        3.0
        >>> ks[2](["x", "y"])
        'sin(x+y)'
    """

    def __init__(self, kernels: Iterable[str | Kernel] = ()):
        self._kernels: list[Kernel] = []
        for kernel in kernels:
            self.push_back(kernel)

    def push_back(self, kernel: str | Kernel) -> None:
        """Append a kernel, given either by built-in name or as a Kernel."""
        if isinstance(kernel, str):
            kernel = get_kernel(kernel)
        self._kernels.append(kernel)

    def names(self) -> list[str]:
        return [k.name for k in self._kernels]

    def __call__(self) -> list[Kernel]:
        return list(self._kernels)

    def __getitem__(self, idx: int) -> Kernel:
        return self._kernels[idx]

    def __len__(self) -> int:
        return len(self._kernels)

    def __iter__(self):
        return iter(self._kernels)

    def __repr__(self) -> str:
        return f"KernelSet({self.names()})"
