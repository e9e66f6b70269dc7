"""
Ops Package

This package provides the elementary functions (the "kernel") that the
activation functions are built from.

Exported:
    series:         Module of from-scratch series/iterative approximations
    ConvergenceError: Raised when ln() does not converge
    Kernel, SeriesKernel, NumpyKernel: Kernel interface and implementations
    kernels:        Dictionary mapping backend names to kernel classes
    make_kernel:    Build a kernel from a Config
    DEFAULT_KERNEL: Kernel used when none is given
"""

from fun.ops import series
from fun.ops.series import ConvergenceError
from fun.ops.kernel import (
    Kernel,
    SeriesKernel,
    NumpyKernel,
    kernels,
    make_kernel,
    DEFAULT_KERNEL
)

__all__ = [
    'series',
    'ConvergenceError',
    'Kernel',
    'SeriesKernel',
    'NumpyKernel',
    'kernels',
    'make_kernel',
    'DEFAULT_KERNEL'
]
