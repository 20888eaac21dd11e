"""cgp_pkg: Cartesian Genetic Programming expressions with generic evaluation."""

__version__ = "0.3.0"

from . import cartesian, config, logging_config, types
from .cartesian import Expression, Kernel, KernelSet
from .logging_config import get_logger, setup_logging
from .types import (
    CGPError,
    GeneIndexError,
    InputSizeError,
    InvalidChromosomeError,
    InvalidParameterError,
)

__all__ = [
    "cartesian",
    "config",
    "logging_config",
    "types",
    "Expression",
    "Kernel",
    "KernelSet",
    "get_logger",
    "setup_logging",
    "CGPError",
    "InvalidParameterError",
    "InvalidChromosomeError",
    "GeneIndexError",
    "InputSizeError",
]
