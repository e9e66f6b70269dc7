#!/usr/bin/env python3
"""
Utility script to run the activation demo from a source checkout.

Usage:
    python scripts/run_example.py
    python scripts/run_example.py series
    python scripts/run_example.py series --check-gradients
"""

import sys
import argparse
from pathlib import Path

# Add the source directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from fun.run.demo import main as demo_main


EXAMPLES = {
    'numpy': {
        'config': None,
        'description': 'Activations on the platform math library'
    },
    'series': {
        'config': 'examples/configs/demo.ini',
        'description': 'Activations on the from-scratch series kernel'
    }
}


def main():
    parser = argparse.ArgumentParser(description='Run activation examples')
    parser.add_argument('example', choices=EXAMPLES.keys(), nargs='?', default='numpy',
                        help='Example to run')
    parser.add_argument('--check-gradients', action='store_true',
                        help='Compare analytic derivatives against autograd')

    args = parser.parse_args()

    example = EXAMPLES[args.example]
    print(f"Running {example['description']}...")

    argv = []
    if example['config'] is not None:
        argv += ['--config', str(Path(__file__).parent.parent / example['config'])]
    if args.check_gradients:
        argv.append('--check-gradients')

    return demo_main(argv)


if __name__ == '__main__':
    sys.exit(main())
