"""
Series Approximation Module.

This module computes the elementary transcendental functions needed by
the activation layer from basic arithmetic only: truncated Taylor series
around 0 for exp/sin/cos, Newton's method for the square root and a
Halley-Newton iteration for the natural logarithm.

Term counts and iteration counts are fixed, so results are deterministic.
No range reduction is performed, which means accuracy degrades as |x|
grows (e.g. exp(-4) is off by roughly 1e-2).

All functions work on Python scalars as well as numpy arrays, element-wise.

Functions:
    pow, factorial, exp, sin, cos, cosh, tanh, sqrt, ln

Exceptions:
    ConvergenceError: raised by ln() when the iteration does not settle
"""

import numpy as onp
import autograd.numpy as np  # type: ignore
from autograd.tracer import getval  # type: ignore

PI = 3.14159265358979323846

# Highest order of the Taylor polynomial used for each function
_EXP_ORDER = 12
_SIN_ORDER = 13
_COS_ORDER = 12

class ConvergenceError(ArithmeticError):
    """An iterative approximation did not converge within its iteration cap."""

def pow(x, exp: int):
    """
    Raise x to a non-negative integer power by repeated multiplication.

    pow(x, 0) is 1.

    Raises:
        ValueError: If exp is negative
    """
    if exp < 0:
        raise ValueError(f"Exponent must be non-negative, got {exp}")

    res = 1.0
    for _ in range(exp):
        res = res * x
    return res

def factorial(num: int) -> int:
    """
    Compute num! as an iterative product.

    factorial(0) is 1.

    Raises:
        ValueError: If num is negative
    """
    if num < 0:
        raise ValueError(f"Factorial is undefined for negative numbers, got {num}")

    res = 1
    while num > 1:
        res *= num
        num -= 1
    return res

def exp(x):
    """exp(x) = 1 + x + x^2/2! + ... + x^12/12!"""
    res = 1.0
    for k in range(1, _EXP_ORDER + 1):
        res = res + pow(x, k) / factorial(k)
    return res

def sin(x):
    """sin(x) = x - x^3/3! + x^5/5! - ... + x^13/13!"""
    res  = x
    sign = -1
    for k in range(3, _SIN_ORDER + 1, 2):
        res  = res + sign * (pow(x, k) / factorial(k))
        sign = -sign
    return res

def cos(x):
    """cos(x) = 1 - x^2/2! + x^4/4! - ... + x^12/12!"""
    res  = 1.0
    sign = -1
    for k in range(2, _COS_ORDER + 1, 2):
        res  = res + sign * (pow(x, k) / factorial(k))
        sign = -sign
    return res

def cosh(x):
    return (exp(x) + exp(-x)) / 2

def tanh(x):
    return (exp(x) - exp(-x)) / (exp(x) + exp(-x))

def sqrt(x, max_iter: int = 15):
    """
    Square root via Newton's method.

    The iteration starts from x itself and always runs exactly 'max_iter'
    steps. sqrt(0) is NaN (0/0 on the first step); negative inputs have no
    fixed point and give meaningless values.
    """
    res = x
    for _ in range(max_iter):
        res = 0.5 * (res + np.divide(x, res))
    return res

def _magnitude(x) -> float:
    """Largest finite |x| over all elements (0.0 if there is none)."""
    values = onp.abs(onp.asarray(getval(x), dtype=float))
    values = values[onp.isfinite(values)]
    return float(values.max()) if values.size else 0.0

def ln(x, epsilon: float = 1e-5, max_iterations: int = 1000):
    """
    Natural logarithm via the Halley-Newton iteration

        y <- y + 2 * (x - exp(y)) / (x + exp(y))

    seeded at y = x - 1. At least one refinement step is always taken;
    iteration stops once successive iterates differ by no more than
    'epsilon' (every element, for array input). NaN iterates end the
    loop and are returned as they are.

    While exp(y) is much larger than x each step lowers y by about 2, so
    reaching ln(x) from the seed takes roughly x/2 steps. The iteration
    budget is therefore 'max_iterations' on top of x/2.

    Parameters:
        x:              Input value(s), expected to be positive
        epsilon:        Convergence tolerance between successive iterates
        max_iterations: Steps allowed beyond the x/2 needed to come down
                        from the seed

    Returns:
        The natural logarithm of x

    Raises:
        ConvergenceError: If x <= 0 (the iterates decrease without bound),
                          or if the iterates have not settled within the
                          iteration budget
    """
    if np.any(x <= 0):
        raise ConvergenceError("ln does not converge for non-positive input")

    budget = max_iterations + int(_magnitude(x) / 2)

    z = x - 1.0
    for _ in range(budget):
        y = z
        e = exp(y)
        z = y + 2 * (x - e) / (x + e)
        if not np.any(np.abs(y - z) > epsilon):
            return z

    raise ConvergenceError(f"ln did not converge within {budget} iterations")
