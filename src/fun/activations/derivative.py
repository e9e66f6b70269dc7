"""
Activation Derivatives Module.

Analytic derivatives of the activation functions in basic_activations,
for use in gradient computations. Each function has the same name and
signature as the activation it differentiates. softmax has no entry.

Exported:
    derivatives: Dictionary mapping activation function names to their derivatives
"""

import autograd.numpy as np  # type: ignore

from fun.activations import basic_activations as act
from fun.ops.kernel  import DEFAULT_KERNEL

def sigmoid(z, kernel=DEFAULT_KERNEL):
    sigval = act.sigmoid(z, kernel)
    return sigval * (1 - sigval)

def relu(z):
    return act._scalar(np.where(z < 0, 0.0, 1.0))

def leaky_relu(z):
    return act._scalar(np.where(z < 0, 1e-2, 1.0))

def parametric_relu(z, a):
    return act._scalar(np.where(z < 0, a, 1.0))

def gelu(z, kernel=DEFAULT_KERNEL):
    cube = z * z * z
    tmp  = 0.0356774 * cube + 0.797885 * z
    cosh = kernel.cosh(tmp)
    return 0.5 * kernel.tanh(tmp) + (0.0535161 * cube + 0.398942 * z) / (cosh * cosh) + 0.5

def silu(z, kernel=DEFAULT_KERNEL):
    return act.sigmoid(z, kernel) + z * sigmoid(z, kernel)

def elu(z, a, kernel=DEFAULT_KERNEL):
    zneg = np.where(z < 0, z, 0.0)
    return act._scalar(np.where(z < 0, a * kernel.exp(zneg), 1.0))

def softplus(z, kernel=DEFAULT_KERNEL):
    return act.sigmoid(z, kernel)

def mish(z, kernel=DEFAULT_KERNEL):
    """
    d/dz [z * tanh(softplus(z))] = e^z * omega / delta^2, where

        omega = e^3z + 4e^2z + (4z + 6)e^z + 4(z + 1)
        delta = (e^z + 1)^2 + 1
    """
    ez    = kernel.exp(z)
    omega = kernel.exp(3 * z) + 4 * kernel.exp(2 * z) + (4 * z + 6) * ez + 4 * (z + 1)
    tmp   = ez + 1
    delta = tmp * tmp + 1
    return ez * omega / (delta * delta)

def id(z):
    return act._scalar(np.ones_like(z))

def binary_step(z):
    return act._scalar(np.zeros_like(z))

def tanh(z, kernel=DEFAULT_KERNEL):
    val = act.tanh(z, kernel)
    return 1 - val * val

def gaussian(z, kernel=DEFAULT_KERNEL):
    return -2 * z * kernel.exp(-z * z)

def gcs(z, kernel=DEFAULT_KERNEL):
    return kernel.cos(z) - z * kernel.sin(z)

derivatives = {
    "sigmoid"        : sigmoid,
    "relu"           : relu,
    "leaky_relu"     : leaky_relu,
    "parametric_relu": parametric_relu,
    "gelu"           : gelu,
    "silu"           : silu,
    "elu"            : elu,
    "softplus"       : softplus,
    "mish"           : mish,
    "id"             : id,
    "binary_step"    : binary_step,
    "tanh"           : tanh,
    "gaussian"       : gaussian,
    "gcs"            : gcs
    }
