"""
Activations Package

This package provides neural-network activation functions and their
analytic derivatives, built on top of a kernel from fun.ops.

Exported:
    activations:      Dictionary mapping activation function names to functions
    activation_codes: Dictionary mapping activation function names to 3-letter codes
    parametric:       Names of activations taking a second parameter 'a'
    derivative:       Module of analytic derivatives (derivative.sigmoid, ...)
    derivatives:      Dictionary mapping activation function names to derivatives
    Individual activation functions: sigmoid, softmax, relu, leaky_relu,
                                     parametric_relu, gelu, silu, elu, softplus,
                                     mish, id, binary_step, tanh, gaussian, gcs
"""

from fun.activations.basic_activations import (
    activations,
    activation_codes,
    parametric,
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
from fun.activations import derivative
from fun.activations.derivative import derivatives

__all__ = [
    'activations',
    'activation_codes',
    'parametric',
    'derivative',
    'derivatives',
    'sigmoid',
    'softmax',
    'relu',
    'leaky_relu',
    'parametric_relu',
    'gelu',
    'silu',
    'elu',
    'softplus',
    'mish',
    'id',
    'binary_step',
    'tanh',
    'gaussian',
    'gcs'
]
