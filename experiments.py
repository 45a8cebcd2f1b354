import os
from collections import namedtuple

import numpy as np
from config import validate_width, validate_widths
from data import generate_test_set, as_rng
from metrics import empirical_risk
from training import train_network, predict
from visualization import plot_fit

WidthResult = namedtuple('WidthResult', ['width', 'risk', 'converged', 'steps', 'parameters'],
                         defaults=(None,))


def run_trial(width, X_train, y_train, n_test=10, rng=None, activation='tanh',
              max_steps=100000, threshold=0.01, learning_rate=0.01, strict=False,
              seed=None, train_fn=train_network, predict_fn=predict, progress=True):
    """Train one network of the given width and score it on a fresh test sample.

    Returns (WidthResult, model, X_test, test_predictions). Errors from
    ``train_fn`` are not caught.
    """
    validate_width(width)
    rng = as_rng(rng)

    model, history = train_fn(
        X_train, y_train, width,
        activation=activation, max_steps=max_steps, threshold=threshold,
        learning_rate=learning_rate, seed=seed, strict=strict, progress=progress
    )

    X_test = generate_test_set(n_test, rng=rng)
    test_preds = predict_fn(model, X_test)
    risk = empirical_risk(X_test, test_preds)

    result = WidthResult(width, risk, history['converged'], history['steps'],
                         model.num_parameters())
    return result, model, X_test, test_preds


def run_width_experiment(widths, X_train, y_train, n_test=10, rng=None, activation='tanh',
                         max_steps=100000, threshold=0.01, learning_rate=0.01, strict=False,
                         train_fn=train_network, predict_fn=predict, plot_dir=None,
                         progress=True):
    """Run one trial per hidden width, in the order given.

    Every width is validated before the first network is trained. Each trial
    gets a torch seed drawn from ``rng``, so a seeded generator reproduces the
    whole sweep. If ``plot_dir`` is given the fit of the last width is saved
    there. Returns a tuple of WidthResult, one per width.
    """
    widths = validate_widths(widths)
    rng = as_rng(rng)

    results = []
    trial = None
    for width in widths:
        if progress:
            print(f"\n===== Training model with width = {width} =====")

        seed = int(rng.integers(2**31 - 1))
        trial = run_trial(
            width, X_train, y_train, n_test=n_test, rng=rng, activation=activation,
            max_steps=max_steps, threshold=threshold, learning_rate=learning_rate,
            strict=strict, seed=seed, train_fn=train_fn, predict_fn=predict_fn,
            progress=progress
        )
        result = trial[0]
        results.append(result)

        if progress:
            print(f"Width {width}: risk = {result.risk:.6f}")

    if plot_dir is not None and trial is not None:
        plot_trial(trial, X_train, y_train, plot_dir, predict_fn=predict_fn)

    return tuple(results)


def plot_trial(trial, X_train, y_train, plot_dir, predict_fn=predict, n_grid=200):
    """Save the fitted curve of a single trial against the training data"""
    result, model, X_test, test_preds = trial
    X_grid = np.linspace(0, 1, n_grid).reshape(-1, 1)
    grid_preds = predict_fn(model, X_grid)
    path = os.path.join(plot_dir, f'fit-width-{result.width}.png')
    return plot_fit(X_train, y_train, X_grid, grid_preds, result.width,
                    X_test=X_test, test_preds=test_preds, path=path)


def format_results(results, n_train=None):
    """Plain-text table of a sweep, one line per width.

    With ``n_train`` given, widths whose parameter count exceeds the number of
    training examples are flagged as overparameterized.
    """
    lines = [f"{'width':>6}  {'params':>6}  {'risk':>10}  {'converged':>9}  {'steps':>7}"]
    for r in results:
        params = '-' if r.parameters is None else r.parameters
        line = f"{r.width:>6}  {params:>6}  {r.risk:>10.6f}  {str(r.converged):>9}  {r.steps:>7}"
        if n_train is not None and r.parameters is not None and r.parameters > n_train:
            line += "  overparameterized"
        lines.append(line)
    return "\n".join(lines)


def best_width(results):
    """Width with the lowest test risk"""
    if not results:
        raise ValueError("No results to choose from")
    return min(results, key=lambda r: r.risk).width
