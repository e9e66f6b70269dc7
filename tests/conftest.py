"""Pytest configuration and shared fixtures."""

import pytest
import sys
import numpy as np
from pathlib import Path

# Add the source directory to the Python path
src_dir = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_dir))


@pytest.fixture
def series_kernel():
    """Kernel built on the from-scratch series approximations."""
    from fun.ops.kernel import SeriesKernel
    return SeriesKernel()


@pytest.fixture
def numpy_kernel():
    """Kernel built on autograd.numpy."""
    from fun.ops.kernel import NumpyKernel
    return NumpyKernel()


@pytest.fixture
def sample_1d_array():
    """Standard 1D array for testing."""
    return np.array([-2.0, -1.0, 0.0, 1.0, 2.0])


@pytest.fixture
def positive_range():
    """The values 1.0, 1.25, ..., 10.0."""
    return np.arange(1.0, 10.25, 0.25)
