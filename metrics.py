import numpy as np
from data import true_function


def _paired(a, b, names):
    a = np.asarray(a, dtype=float).flatten()
    b = np.asarray(b, dtype=float).flatten()
    if a.shape[0] != b.shape[0]:
        raise ValueError(
            f"{names[0]} and {names[1]} differ in length ({a.shape[0]} vs {b.shape[0]})"
        )
    if a.shape[0] == 0:
        raise ValueError(f"{names[0]} and {names[1]} are empty")
    return a, b


def mean_squared_error(y_true, y_pred):
    """Mean squared error between two equal-length arrays"""
    y_true, y_pred = _paired(y_true, y_pred, ('y_true', 'y_pred'))
    return float(np.mean((y_pred - y_true) ** 2))


def empirical_risk(xs, predictions):
    """Mean squared error of predictions against sin(15x) at the matching inputs.

    Both sequences are flattened and must have the same length; a mismatch
    raises ValueError rather than truncating.
    """
    xs, predictions = _paired(xs, predictions, ('xs', 'predictions'))
    return float(np.mean((predictions - true_function(xs)) ** 2))
