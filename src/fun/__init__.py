"""
fun - activation functions and the elementary functions they are built from.

This package provides a small kernel of transcendental functions computed
from scratch (Taylor series, Newton and Halley-Newton iterations), an
equivalent kernel backed by autograd.numpy, and a catalog of neural-network
activation functions together with their analytic derivatives.

Main components:
- ops: the kernels (series approximations and the numpy-backed kernel)
- activations: activation functions and their derivatives
- run: configuration, gradient checking and the demo entry point

Example:
    >>> import fun
    >>> fun.sigmoid(4.0)
    >>> fun.derivative.sigmoid(4.0)
    >>> fun.softmax([0, 1, 2], kernel=fun.SeriesKernel())
"""

__version__ = "0.1.0"

from fun.ops import series, ConvergenceError, SeriesKernel, NumpyKernel, make_kernel
from fun.activations import (
    activations,
    derivatives,
    derivative,
    sigmoid,
    softmax,
    relu,
    leaky_relu,
    parametric_relu,
    gelu,
    silu,
    elu,
    softplus,
    mish,
    id,
    binary_step,
    tanh,
    gaussian,
    gcs
)
from fun.run.config import Config

__all__ = [
    "series",
    "ConvergenceError",
    "SeriesKernel",
    "NumpyKernel",
    "make_kernel",
    "activations",
    "derivatives",
    "derivative",
    "Config",
    "sigmoid",
    "softmax",
    "relu",
    "leaky_relu",
    "parametric_relu",
    "gelu",
    "silu",
    "elu",
    "softplus",
    "mish",
    "id",
    "binary_step",
    "tanh",
    "gaussian",
    "gcs",
]
