"""
Gradient Check Module

This module verifies the analytic derivatives in fun.activations.derivative
against automatic differentiation: autograd's elementwise_grad is applied to
each activation and the result compared with the hand-written derivative
over a grid of inputs.

The check is meaningful with the numpy kernel, whose functions are the
exact ones the analytic formulas differentiate. Under the series kernel it
measures how far the truncated approximations drift from their derivatives.

Functions:
    check_derivative: Maximum absolute error for one activation
    check_all:        Maximum absolute error for every differentiable activation
"""

import inspect
import autograd.numpy as np  # type: ignore
from autograd import elementwise_grad  # type: ignore

from fun.activations import activations, derivatives, parametric
from fun.ops.kernel  import Kernel, DEFAULT_KERNEL

def _default_grid():
    # 60 points so that the kinks of relu & co. at 0 are not sampled
    return np.linspace(-3.0, 3.0, 60)

def bind(name: str, func, kernel: Kernel, a: float):
    """Return a single-argument version of an activation or derivative."""
    kwargs = {"kernel": kernel} if "kernel" in inspect.signature(func).parameters else {}
    if name in parametric:
        return lambda z: func(z, a, **kwargs)
    return lambda z: func(z, **kwargs)

def check_derivative(name  : str,
                     zs    = None,
                     kernel: Kernel | None = None,
                     a     : float = 0.2) -> float:
    """
    Compare an analytic derivative with autograd's.

    Parameters:
        name:   Activation name (key in 'derivatives')
        zs:     Points to evaluate at (defaults to 60 points on [-3, 3])
        kernel: Kernel to evaluate with (defaults to DEFAULT_KERNEL)
        a:      Parameter passed to parametric activations (prelu, elu)

    Returns:
        The maximum absolute difference over 'zs'

    Raises:
        ValueError: If 'name' has no analytic derivative
    """
    if name not in derivatives:
        raise ValueError(f"No analytic derivative for activation '{name}'")

    zs     = _default_grid() if zs is None else np.asarray(zs, dtype=float)
    kernel = DEFAULT_KERNEL if kernel is None else kernel

    activation = bind(name, activations[name], kernel, a)
    analytic   = bind(name, derivatives[name], kernel, a)

    # broadcast so that constant derivatives (id, binary_step) compare element-wise
    expected = elementwise_grad(activation)(zs)
    actual   = analytic(zs) * np.ones_like(zs)

    return float(np.max(np.abs(actual - expected)))

def check_all(zs=None, kernel: Kernel | None = None, a: float = 0.2) -> dict[str, float]:
    """Run check_derivative() for every activation that has a derivative."""
    return {name: check_derivative(name, zs, kernel, a) for name in derivatives}
