"""
Run Package

Configuration, gradient checking and the demonstration entry point.
"""

from fun.run.config    import Config
from fun.run.gradcheck import check_derivative, check_all

__all__ = [
    'Config',
    'check_derivative',
    'check_all'
]
