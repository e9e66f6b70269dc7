#!/usr/bin/env python3
"""
Demonstration of the activation functions.

Evaluates every activation (and its derivative) at a few fixed inputs and
prints label/value pairs to stdout.

Usage:
    fun-demo
    fun-demo --kernel series
    fun-demo --config examples/configs/demo.ini --check-gradients
"""

import argparse
import warnings
import autograd.numpy as np  # type: ignore

from fun.activations import activations, activation_codes, derivatives
from fun.ops.kernel  import kernels, make_kernel
from fun.run.config  import Config
from fun.run.gradcheck import bind, check_all

LABELS = {
    "sigmoid"        : "Sigmoid",
    "softmax"        : "Softmax",
    "relu"           : "ReLU",
    "leaky_relu"     : "Leaky ReLU",
    "parametric_relu": "Parametric ReLU",
    "gelu"           : "GELU",
    "silu"           : "SiLU",
    "elu"            : "ELU",
    "softplus"       : "Softplus",
    "mish"           : "Mish",
    "id"             : "Identity",
    "binary_step"    : "Binary Step",
    "tanh"           : "tanh",
    "gaussian"       : "Gaussian",
    "gcs"            : "Growing Cosine Unit"
    }

_WIDTH = 32

def _print_value(label: str, value):
    if not np.all(np.isfinite(value)):
        warnings.warn(f"{label} produced a non-finite value: {value}")
    print(f"{label + ':':<{_WIDTH}} {value}")

def _evaluate(funcs: dict, name: str, config: Config, kernel):
    """Evaluate funcs[name] at the configured input for that activation."""
    if name == "elu":
        return bind(name, funcs[name], kernel, config.elu_scale)(config.elu_input)
    return bind(name, funcs[name], kernel, config.prelu_slope)(config.scalar_input)

def run(config: Config, check_gradients: bool = False):
    """Print every configured activation, its derivative and optionally the gradient check."""
    kernel = make_kernel(config)
    names  = config.activation_options

    print("---------------------")
    print(f"Kernel: {kernel!r}")
    print("---------------------")

    for name in names:
        if name == "softmax":
            inputs = config.softmax_inputs
            _print_value(LABELS[name], activations[name](inputs, kernel=kernel))
            _print_value(LABELS[name] + " (array)", activations[name](np.array(inputs), kernel=kernel))
            continue
        _print_value(LABELS[name], float(_evaluate(activations, name, config, kernel)))

    print("\n---------------------")

    for name in names:
        if name not in derivatives:
            continue
        _print_value(LABELS[name] + " Derivative", float(_evaluate(derivatives, name, config, kernel)))

    if check_gradients:
        print("\n---------------------")
        print("Max |analytic - autograd| on [-3, 3]")
        slope = config.prelu_slope
        for name, error in check_all(kernel=kernel, a=slope).items():
            if name not in names:
                continue
            status = "ok" if error < 1e-4 else "MISMATCH"
            print(f"{activation_codes[name]}  {LABELS[name] + ':':<{_WIDTH - 5}} {error:.3e}  {status}")

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Print activation function values')
    parser.add_argument('--config', default=None,
                        help='INI file with [KERNEL], [ACTIVATIONS] and [DEMO] sections')
    parser.add_argument('--kernel', choices=list(kernels.keys()), default=None,
                        help='Kernel backend (overrides the config file)')
    parser.add_argument('--check-gradients', action='store_true',
                        help='Compare analytic derivatives against autograd')

    args = parser.parse_args(argv)

    config = Config(args.config)
    if args.kernel is not None:
        config.kernel_backend = args.kernel

    run(config, check_gradients=args.check_gradients)
    return 0

if __name__ == '__main__':
    raise SystemExit(main())
