"""Shared types and exceptions for the CGP expression core.

Every failure raised by the package derives from ``CGPError`` which is itself a
``ValueError``, so callers that only catch ``ValueError`` keep working.
"""

from __future__ import annotations

# A chromosome is a flat list of non-negative integer genes
Chromosome = list[int]


class CGPError(ValueError):
    """Base class for all CGP expression errors."""


class InvalidParameterError(CGPError):
    """Topology parameters or function set cannot describe an expression."""


class InvalidChromosomeError(CGPError):
    """Chromosome has the wrong length or a gene outside its bounds."""


class GeneIndexError(CGPError, IndexError):
    """Index of a gene to be mutated is outside the chromosome."""


class InputSizeError(CGPError):
    """Number of inputs passed for evaluation does not match ``n``."""
