"""
Unit tests for the activation functions.

Tests all 15 activation functions in src/fun/activations/basic_activations.py
"""

import math
import warnings
import pytest
import numpy as np
from autograd import elementwise_grad  # type: ignore
from fun.activations.basic_activations import (
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
    gcs,
    activations,
    activation_codes,
    parametric,
)


class TestActivationsDictionary:
    """Test that all activations are accessible via the activations dictionary."""

    def test_all_fifteen_functions_in_dictionary(self):
        expected_names = [
            'sigmoid', 'softmax', 'relu', 'leaky_relu', 'parametric_relu', 'gelu',
            'silu', 'elu', 'softplus', 'mish', 'id', 'binary_step', 'tanh',
            'gaussian', 'gcs'
        ]
        for name in expected_names:
            assert name in activations, f"{name} not found in activations dictionary"
        assert len(activations) == 15

    def test_dictionary_functions_callable(self):
        for name, func in activations.items():
            assert callable(func), f"{name} is not callable"

    def test_codes_are_unique_three_letters(self):
        assert set(activation_codes.keys()) == set(activations.keys())
        codes = list(activation_codes.values())
        assert len(set(codes)) == len(codes)
        for code in codes:
            assert len(code) == 3 and code.isupper()

    def test_parametric_names(self):
        assert set(parametric) == {'parametric_relu', 'elu'}


class TestSigmoid:
    """Test sigmoid."""

    def test_zero(self):
        assert abs(sigmoid(0.0) - 0.5) < 1e-6

    def test_four(self):
        assert abs(sigmoid(4.0) - 0.98201) < 1e-4

    def test_symmetry(self):
        for z in [0.5, 2.0, 7.0]:
            assert sigmoid(-z) == pytest.approx(1 - sigmoid(z))

    def test_large_magnitudes_stay_in_range(self):
        assert 0 < sigmoid(-50.0) < 1e-20
        assert sigmoid(50.0) == pytest.approx(1.0)

    def test_output_range(self):
        for z in [-10, -1, 0, 1, 10]:
            assert 0 < sigmoid(float(z)) < 1

    def test_1d_array(self, sample_1d_array):
        expected = 1 / (1 + np.exp(-sample_1d_array))
        np.testing.assert_allclose(sigmoid(sample_1d_array), expected)

    def test_series_kernel_near_zero(self, series_kernel):
        assert sigmoid(0.5, kernel=series_kernel) == pytest.approx(1 / (1 + math.exp(-0.5)), abs=1e-9)
        assert sigmoid(-0.5, kernel=series_kernel) == pytest.approx(1 / (1 + math.exp(0.5)), abs=1e-9)

    def test_extreme_inputs_raise_no_warnings(self):
        zs = np.array([-1000.0, 1000.0])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            np.testing.assert_array_equal(sigmoid(zs), [0.0, 1.0])

    def test_gradient_finite_at_extremes(self):
        zs = np.array([-1000.0, 1000.0])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            grad = elementwise_grad(sigmoid)(zs)
        assert np.all(np.isfinite(grad))
        np.testing.assert_array_equal(grad, [0.0, 0.0])


class TestSoftmax:
    """Test softmax on sequences."""

    def test_length_and_sum(self):
        result = softmax(list(range(10)))
        assert len(result) == 10
        assert abs(np.sum(result) - 1.0) < 1e-6

    def test_elements_in_open_unit_interval(self):
        result = softmax([-1.0, 0.0, 3.5, 2.0])
        assert np.all(result > 0)
        assert np.all(result < 1)

    def test_monotonic_for_increasing_input(self):
        result = softmax(list(range(10)))
        assert np.all(np.diff(result) > 0)

    def test_uniform_input(self):
        np.testing.assert_allclose(softmax([3.0, 3.0, 3.0, 3.0]), [0.25] * 4)

    def test_accepts_tuple_and_array(self):
        from_tuple = softmax((0.0, 1.0, 2.0))
        from_array = softmax(np.array([0.0, 1.0, 2.0]))
        np.testing.assert_allclose(from_tuple, from_array)

    def test_returns_fresh_array(self):
        inputs = np.array([0.0, 1.0, 2.0])
        result = softmax(inputs)
        assert result is not inputs
        np.testing.assert_array_equal(inputs, [0.0, 1.0, 2.0])

    def test_does_not_mutate_list(self):
        inputs = [0, 1, 2, 3]
        softmax(inputs)
        assert inputs == [0, 1, 2, 3]

    def test_series_kernel(self, series_kernel):
        result = softmax(list(range(10)), kernel=series_kernel)
        assert len(result) == 10
        assert abs(np.sum(result) - 1.0) < 1e-6
        assert np.all(np.diff(result) > 0)


class TestRelu:
    """Test relu."""

    def test_zero(self):
        assert relu(0.0) == 0.0

    def test_positive_passes_through(self, positive_range):
        for z in positive_range:
            assert relu(z) == z

    def test_negative_is_zero(self, positive_range):
        for z in positive_range:
            assert relu(-z) == 0.0

    def test_1d_array(self, sample_1d_array):
        np.testing.assert_array_equal(relu(sample_1d_array), [0.0, 0.0, 0.0, 1.0, 2.0])

    def test_float32(self):
        assert relu(np.float32(2.5)) == np.float32(2.5)


class TestLeakyRelu:
    """Test leaky_relu with its fixed 0.01 slope."""

    def test_zero(self):
        assert leaky_relu(0.0) == 0.0

    def test_positive_passes_through(self, positive_range):
        for z in positive_range:
            assert leaky_relu(z) == z

    def test_negative_is_scaled(self, positive_range):
        for z in positive_range:
            assert leaky_relu(-z) == 0.01 * -z


class TestParametricRelu:
    """Test parametric_relu with caller-supplied slopes."""

    @pytest.mark.parametrize("a", [0.25, 0.5, 0.75, 1.0])
    def test_slopes(self, a, positive_range):
        for z in positive_range:
            assert parametric_relu(z, a) == z
            assert parametric_relu(-z, a) == a * -z

    def test_zero_slope_is_relu(self, sample_1d_array):
        np.testing.assert_array_equal(parametric_relu(sample_1d_array, 0.0), relu(sample_1d_array))


class TestGelu:
    """Test the tanh approximation of GELU."""

    def test_zero(self):
        assert gelu(0.0) == 0.0

    def test_large_positive_is_identity(self):
        assert abs(gelu(4.0) - 4.0) < 1e-3

    def test_large_negative_is_zero(self):
        assert abs(gelu(-4.0)) < 1e-3

    def test_known_value(self):
        # 0.5 * (1 + tanh(sqrt(2/pi) * 1.044715))
        expected = 0.5 * (1 + math.tanh(math.sqrt(2 / math.pi) * 1.044715))
        assert gelu(1.0) == pytest.approx(expected)

    def test_series_kernel_close(self, series_kernel):
        assert gelu(1.0, kernel=series_kernel) == pytest.approx(gelu(1.0), abs=1e-6)


class TestSilu:
    """Test SiLU (swish)."""

    def test_zero(self):
        assert silu(0.0) == 0.0

    def test_is_z_times_sigmoid(self):
        for z in [-3.0, -0.5, 1.0, 4.0]:
            assert silu(z) == pytest.approx(z * sigmoid(z))


class TestElu:
    """Test ELU with a caller-supplied scale."""

    def test_positive_passes_through(self):
        assert elu(1.2, 0.2) == 1.2

    def test_negative(self):
        assert elu(-1.0, 0.2) == pytest.approx(0.2 * (math.exp(-1.0) - 1))

    def test_saturates_at_minus_scale(self):
        assert elu(-30.0, 0.5) == pytest.approx(-0.5)

    def test_large_positive_raises_no_warnings(self):
        zs = np.array([-1000.0, 1000.0])
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            np.testing.assert_allclose(elu(zs, 0.5), [-0.5, 1000.0])
            grad = elementwise_grad(lambda z: elu(z, 0.5))(zs)
        np.testing.assert_array_equal(grad, [0.0, 1.0])


class TestSoftplus:
    """Test softplus."""

    def test_zero(self):
        assert softplus(0.0) == pytest.approx(math.log(2.0))

    def test_large_positive(self):
        assert softplus(20.0) == pytest.approx(20.0, abs=1e-6)

    def test_series_kernel(self, series_kernel):
        assert abs(softplus(0.0, kernel=series_kernel) - math.log(2.0)) < 1e-4

    def test_series_kernel_large_input(self, series_kernel):
        """ln(1 + e^10) needs more steps than the fixed iteration cap."""
        result = softplus(10.0, kernel=series_kernel)
        assert math.isfinite(result)
        assert result == pytest.approx(10.0, abs=1e-3)


class TestMish:
    """Test mish."""

    def test_zero(self):
        assert mish(0.0) == 0.0

    def test_definition(self):
        for z in [-2.0, 0.5, 3.0]:
            assert mish(z) == pytest.approx(z * math.tanh(math.log1p(math.exp(z))))


class TestIdentityAndStep:
    """Test id and binary_step."""

    def test_identity(self, sample_1d_array):
        assert id(5.0) == 5.0
        assert id(sample_1d_array) is sample_1d_array

    def test_binary_step_zero_is_one(self):
        assert binary_step(0.0) == 1

    def test_binary_step_small_negative_is_zero(self):
        assert binary_step(-1e-9) == 0

    def test_binary_step_1d_array(self, sample_1d_array):
        np.testing.assert_array_equal(binary_step(sample_1d_array), [0.0, 0.0, 1.0, 1.0, 1.0])


class TestTanh:
    """Test tanh."""

    def test_zero(self):
        assert tanh(0.0) == 0.0

    def test_odd(self):
        for z in [0.3, 1.0, 4.0]:
            assert tanh(-z) == pytest.approx(-tanh(z))

    def test_series_kernel_odd(self, series_kernel):
        for z in [0.3, 1.0, 4.0]:
            assert tanh(-z, kernel=series_kernel) == -tanh(z, kernel=series_kernel)


class TestGaussianAndGcs:
    """Test gaussian and the growing cosine unit."""

    def test_gaussian(self):
        assert gaussian(0.0) == 1.0
        assert gaussian(1.0) == pytest.approx(math.exp(-1.0))
        assert gaussian(-2.0) == gaussian(2.0)

    def test_gcs_four(self):
        assert abs(gcs(4.0) - (-2.6146)) < 1e-3

    def test_gcs_zero(self):
        assert gcs(0.0) == 0.0


class TestEndToEnd:
    """The z = 4.0 scenario."""

    def test_scenario(self):
        z = 4.0
        assert abs(sigmoid(z) - 0.98201) < 1e-4
        assert relu(z) == 4.0
        assert abs(gcs(z) - 4.0 * math.cos(4.0)) < 1e-3


class TestScalarResults:
    """Scalar input gives a numpy scalar back, never a 0-d array."""

    @pytest.mark.parametrize("func,args", [
        (sigmoid,         ()),
        (relu,            ()),
        (leaky_relu,      ()),
        (parametric_relu, (0.2,)),
        (elu,             (0.2,)),
        (binary_step,     ()),
    ])
    @pytest.mark.parametrize("z", [-4.0, 4.0])
    def test_branching_functions(self, func, args, z):
        result = func(z, *args)
        assert not isinstance(result, np.ndarray)
        assert np.ndim(result) == 0

    def test_array_input_still_gives_array(self, sample_1d_array):
        assert isinstance(relu(sample_1d_array), np.ndarray)
        assert relu(sample_1d_array).shape == sample_1d_array.shape
