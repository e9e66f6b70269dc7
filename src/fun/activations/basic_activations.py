import numpy as onp
import autograd.numpy as np  # type: ignore

from fun.ops.kernel import DEFAULT_KERNEL

def _scalar(value):
    """Unwrap 0-d arrays so scalar input gives scalar output."""
    if isinstance(value, onp.ndarray) and value.ndim == 0:
        return value[()]
    return value

def sigmoid(z, kernel=DEFAULT_KERNEL):
    # Pick the form that cannot overflow on either side of 0. Each branch
    # only sees its own half of the inputs, so the unused one stays finite.
    zneg   = np.where(z < 0, z, 0.0)
    zpos   = np.where(z < 0, 0.0, z)
    expval = kernel.exp(zneg)
    return _scalar(np.where(z < 0, expval / (1 + expval), 1 / (1 + kernel.exp(-zpos))))

def softmax(zs, kernel=DEFAULT_KERNEL):
    """
    Map a 1-D sequence to a probability distribution.

    Accepts a list, tuple or array; always returns a new array of the
    same length, the input is left untouched.
    """
    exps = kernel.exp(np.array(zs, dtype=float))
    return exps / np.sum(exps)

def relu(z):
    return _scalar(np.where(z < 0, 0.0, z))

def leaky_relu(z):
    return _scalar(np.where(z < 0, 1e-2 * z, z))

def parametric_relu(z, a):
    return _scalar(np.where(z < 0, a * z, z))

def gelu(z, kernel=DEFAULT_KERNEL):
    # tanh approximation
    return 0.5 * z * (1 + kernel.tanh(kernel.sqrt(2 / kernel.PI) * (z + 0.044715 * z * z * z)))

def silu(z, kernel=DEFAULT_KERNEL):
    return z * sigmoid(z, kernel)

def elu(z, a, kernel=DEFAULT_KERNEL):
    zneg = np.where(z < 0, z, 0.0)
    return _scalar(np.where(z < 0, a * (kernel.exp(zneg) - 1), z))

def softplus(z, kernel=DEFAULT_KERNEL):
    return kernel.ln(1 + kernel.exp(z))

def mish(z, kernel=DEFAULT_KERNEL):
    return z * kernel.tanh(softplus(z, kernel))

def id(z):
    return z

def binary_step(z):
    return _scalar(np.where(z < 0, 0.0, 1.0))

def tanh(z, kernel=DEFAULT_KERNEL):
    return kernel.tanh(z)

def gaussian(z, kernel=DEFAULT_KERNEL):
    return kernel.exp(-z * z)

def gcs(z, kernel=DEFAULT_KERNEL):
    # growing cosine unit
    return z * kernel.cos(z)

activations = {
    "sigmoid"        : sigmoid,
    "softmax"        : softmax,
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

# 3-letter identifiers for each activation function
activation_codes = {
    "sigmoid"        : "SIG",
    "softmax"        : "SMX",
    "relu"           : "RLU",
    "leaky_relu"     : "LRU",
    "parametric_relu": "PRU",
    "gelu"           : "GLU",
    "silu"           : "SLU",
    "elu"            : "ELU",
    "softplus"       : "SPL",
    "mish"           : "MSH",
    "id"             : "IDN",
    "binary_step"    : "BIN",
    "tanh"           : "TNH",
    "gaussian"       : "GSS",
    "gcs"            : "GCU"
    }

# Activations taking a second, caller-supplied parameter 'a'
parametric = ("parametric_relu", "elu")
