# Experiment settings. The script runs top to bottom from these values.

import numbers

CONFIG = {
    # Sampler
    'training_step': 0.05,      # grid increment over [0, 1] -> 21 points
    'noise_std': 0.1,           # standard deviation of the target noise (variance 0.01)
    'n_test': 10,               # fresh uniform test points per width

    # Widths
    'trial_widths': [3, 4],     # underfitting examples, fitted and plotted first
    'widths': list(range(5, 31)),

    # Training
    'activation': 'tanh',
    'max_steps': 100000,
    'threshold': 0.01,          # stop when max |dE/dw| falls below this
    'learning_rate': 0.01,      # initial Rprop step size
    'strict': False,            # raise instead of warn when a fit does not converge

    'random_seed': 42,
    'img_dir': 'img',
}


class ConfigurationError(ValueError):
    """Raised for a degenerate experiment configuration"""


def validate_width(width):
    """Hidden-layer width must be a positive integer"""
    if isinstance(width, bool) or not isinstance(width, numbers.Integral):
        raise ConfigurationError(f"Hidden width must be an integer, got {width!r}")
    if width < 1:
        raise ConfigurationError(f"Hidden width must be >= 1, got {width}")
    return width


def validate_widths(widths):
    return [int(validate_width(width)) for width in widths]
