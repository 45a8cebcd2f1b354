import numpy as np
import pytest
from config import ConfigurationError
from data import true_function, generate_training_set, generate_test_set


def test_training_grid_has_21_points():
    X, y = generate_training_set(step=0.05, rng=0)
    assert X.shape == (21, 1)
    assert y.shape == (21, 1)
    np.testing.assert_allclose(X.flatten(), np.arange(21) * 0.05, atol=1e-12)
    assert X[0, 0] == 0.0
    assert X[-1, 0] == 1.0


def test_training_targets_without_noise_are_true_function():
    X, y = generate_training_set(step=0.05, noise_std=0.0, rng=0)
    np.testing.assert_allclose(y, np.sin(15 * X))


def test_training_noise_is_seeded():
    _, y1 = generate_training_set(rng=123)
    _, y2 = generate_training_set(rng=123)
    _, y3 = generate_training_set(rng=124)
    np.testing.assert_array_equal(y1, y2)
    assert not np.array_equal(y1, y3)


def test_training_noise_scale():
    X, y = generate_training_set(step=0.0001, noise_std=0.1, rng=1)
    residuals = (y - true_function(X)).flatten()
    assert abs(residuals.mean()) < 0.01
    assert residuals.std() == pytest.approx(0.1, rel=0.05)


def test_test_set_is_uniform_on_unit_interval(rng):
    X = generate_test_set(10, rng=rng)
    assert X.shape == (10, 1)
    assert np.all((X >= 0) & (X <= 1))


def test_test_set_is_seeded():
    np.testing.assert_array_equal(generate_test_set(10, rng=7), generate_test_set(10, rng=7))


def test_generator_state_advances(rng):
    first = generate_test_set(10, rng=rng)
    second = generate_test_set(10, rng=rng)
    assert not np.array_equal(first, second)


@pytest.mark.parametrize("step", [0, -0.1, 1.5])
def test_bad_step_rejected(step):
    with pytest.raises(ConfigurationError):
        generate_training_set(step=step)


def test_negative_noise_rejected():
    with pytest.raises(ConfigurationError):
        generate_training_set(noise_std=-0.1)


@pytest.mark.parametrize("n", [0, -3, 2.5])
def test_bad_test_size_rejected(n):
    with pytest.raises(ConfigurationError):
        generate_test_set(n)


@pytest.mark.parametrize("step, expected", [
    (0.3, [0.0, 0.3, 0.6, 0.9]),
    (0.7, [0.0, 0.7]),
    (0.25, [0.0, 0.25, 0.5, 0.75, 1.0]),
])
def test_grid_keeps_requested_increment(step, expected):
    X, y = generate_training_set(step=step, rng=0)
    np.testing.assert_allclose(X.flatten(), expected, atol=1e-12)
    np.testing.assert_allclose(np.diff(X.flatten()), step, atol=1e-12)
    assert len(y) == len(expected)
    assert X.max() <= 1.0
