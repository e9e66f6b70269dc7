"""
Kernel Module

This module defines the interface through which the activation layer reaches
the elementary transcendental functions, and its two implementations:
one built on the from-scratch series approximations and one built on the
platform math library (autograd.numpy).

Classes:
    Kernel:       Abstract base class defining the kernel interface
    SeriesKernel: Kernel backed by fun.ops.series (Taylor/Newton/Halley)
    NumpyKernel:  Kernel backed by autograd.numpy

Exported:
    kernels:        Dictionary mapping backend names to kernel classes
    make_kernel:    Build the kernel described by a Config
    DEFAULT_KERNEL: Kernel used by the activation layer when none is given
"""

from abc    import ABC, abstractmethod
from typing import TYPE_CHECKING
import autograd.numpy as np  # type: ignore

from fun.ops import series

if TYPE_CHECKING:
    from fun.run.config import Config

class Kernel(ABC):
    """
    Abstract base class for the elementary functions used by activations.

    Subclasses provide exp, sin, cos, sqrt and ln. The hyperbolic functions
    are derived from the kernel's own exp, so a kernel is self-consistent
    without consulting any other math library.

    Public Attributes:
        name: Backend name (key in the 'kernels' dictionary)
        PI:   The constant pi

    Public Methods (must be implemented by subclasses):
        exp(x), sin(x), cos(x), sqrt(x), ln(x)

    Public Methods:
        cosh(x), tanh(x)
    """

    name = ""
    PI   = series.PI

    @abstractmethod
    def exp(self, x):
        pass

    @abstractmethod
    def sin(self, x):
        pass

    @abstractmethod
    def cos(self, x):
        pass

    @abstractmethod
    def sqrt(self, x):
        pass

    @abstractmethod
    def ln(self, x):
        pass

    def cosh(self, x):
        return (self.exp(x) + self.exp(-x)) / 2

    def tanh(self, x):
        ex, emx = self.exp(x), self.exp(-x)
        return (ex - emx) / (ex + emx)

    def __repr__(self):
        return f"{type(self).__name__}()"

class SeriesKernel(Kernel):
    """
    Kernel built on truncated series and fixed-count iterations.

    Cheap and deterministic, but exp/sin/cos lose accuracy quickly away
    from 0 since no range reduction is done.

    Public Attributes:
        sqrt_iterations:   Number of Newton steps taken by sqrt()
        ln_epsilon:        Convergence tolerance of ln()
        ln_max_iterations: Steps ln() may take beyond the x/2 it needs to come down
    """

    name = "series"

    def __init__(self,
                 sqrt_iterations  : int   = 15,
                 ln_epsilon       : float = 1e-5,
                 ln_max_iterations: int   = 1000):

        if sqrt_iterations < 1:
            raise ValueError(f"sqrt_iterations must be positive, got {sqrt_iterations}")
        if ln_max_iterations < 1:
            raise ValueError(f"ln_max_iterations must be positive, got {ln_max_iterations}")

        self.sqrt_iterations   = sqrt_iterations
        self.ln_epsilon        = ln_epsilon
        self.ln_max_iterations = ln_max_iterations

    def exp(self, x):
        return series.exp(x)

    def sin(self, x):
        return series.sin(x)

    def cos(self, x):
        return series.cos(x)

    def sqrt(self, x):
        return series.sqrt(x, self.sqrt_iterations)

    def ln(self, x):
        return series.ln(x, self.ln_epsilon, self.ln_max_iterations)

    def __repr__(self):
        return (f"SeriesKernel(sqrt_iterations={self.sqrt_iterations}, "
                f"ln_epsilon={self.ln_epsilon}, "
                f"ln_max_iterations={self.ln_max_iterations})")

class NumpyKernel(Kernel):
    """
    Kernel built on autograd.numpy.

    Accurate over the whole floating-point range and differentiable by
    autograd. The hyperbolic functions use the library versions, which
    do not overflow for large |x|.
    """

    name = "numpy"
    PI   = np.pi

    def exp(self, x):
        return np.exp(x)

    def sin(self, x):
        return np.sin(x)

    def cos(self, x):
        return np.cos(x)

    def sqrt(self, x):
        return np.sqrt(x)

    def ln(self, x):
        return np.log(x)

    def cosh(self, x):
        return np.cosh(x)

    def tanh(self, x):
        return np.tanh(x)

kernels = {
    "series": SeriesKernel,
    "numpy" : NumpyKernel
    }

def make_kernel(config: 'Config') -> Kernel:
    """
    Build the kernel selected by 'config.kernel_backend'.

    Raises:
        ValueError: If the backend name is unknown
    """
    backend = config.kernel_backend
    if backend not in kernels:
        raise ValueError(f"Unknown kernel backend '{backend}', expected one of {list(kernels)}")

    if backend == "series":
        return SeriesKernel(sqrt_iterations  =config.sqrt_iterations,
                            ln_epsilon       =config.ln_epsilon,
                            ln_max_iterations=config.ln_max_iterations)
    return kernels[backend]()

DEFAULT_KERNEL = NumpyKernel()
