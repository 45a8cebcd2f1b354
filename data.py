import numpy as np
from config import ConfigurationError


def as_rng(rng):
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def true_function(x):
    """Noiseless target sin(15x)"""
    return np.sin(15 * np.asarray(x, dtype=float))


def generate_training_set(step=0.05, noise_std=0.1, rng=None):
    """Grid over [0, 1] at increments of ``step`` with Gaussian noise on the targets.

    The grid stops at the last multiple of ``step`` not exceeding 1, so
    step=0.05 gives 21 points ending at 1.0 and step=0.3 gives 0, 0.3, 0.6, 0.9.

    ``noise_std`` is a standard deviation: 0.1 gives noise variance 0.01.
    ``rng`` is a numpy Generator, a seed, or None.
    """
    if not 0 < step <= 1:
        raise ConfigurationError(f"step must be in (0, 1], got {step}")
    if noise_std < 0:
        raise ConfigurationError(f"noise_std must be >= 0, got {noise_std}")
    rng = as_rng(rng)

    # 0, step, 2*step, ... up to and including 1.0 when step divides it
    n_points = int(np.floor(1 / step + 1e-9)) + 1
    X = np.minimum(np.arange(n_points) * step, 1.0).reshape(-1, 1)
    y = true_function(X) + rng.normal(0.0, noise_std, size=(n_points, 1))
    return X, y


def generate_test_set(n=10, rng=None):
    """Draw n inputs independently and uniformly from [0, 1]"""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise ConfigurationError(f"Test set size must be a positive integer, got {n!r}")
    rng = as_rng(rng)
    return rng.uniform(0.0, 1.0, size=(int(n), 1))
