import os
import torch
import numpy as np
from config import CONFIG
from data import generate_training_set
from experiments import run_trial, run_width_experiment, plot_trial, format_results, best_width
from metrics import mean_squared_error
from training import predict
from visualization import plot_risk_vs_width


def main():
    # Set seeds for reproducibility
    torch.manual_seed(CONFIG['random_seed'])
    rng = np.random.default_rng(CONFIG['random_seed'])

    X_train, y_train = generate_training_set(
        step=CONFIG['training_step'], noise_std=CONFIG['noise_std'], rng=rng
    )
    print(f"Training set: {len(X_train)} points, noise std {CONFIG['noise_std']}")

    training = dict(
        n_test=CONFIG['n_test'],
        rng=rng,
        activation=CONFIG['activation'],
        max_steps=CONFIG['max_steps'],
        threshold=CONFIG['threshold'],
        learning_rate=CONFIG['learning_rate'],
        strict=CONFIG['strict'],
    )

    # Underfitting examples
    for width in CONFIG['trial_widths']:
        print(f"\n===== Trial fit with width = {width} =====")
        trial = run_trial(width, X_train, y_train, seed=int(rng.integers(2**31 - 1)), **training)
        result, model = trial[0], trial[1]
        train_risk = mean_squared_error(y_train, predict(model, X_train))
        print(f"Width {width}: training MSE = {train_risk:.6f}, test risk = {result.risk:.6f}")
        plot_trial(trial, X_train, y_train, CONFIG['img_dir'])

    # Sweep
    results = run_width_experiment(
        CONFIG['widths'], X_train, y_train, plot_dir=CONFIG['img_dir'], **training
    )

    print("\n" + format_results(results, n_train=len(X_train)))
    print(f"\nLowest test risk at width {best_width(results)}")

    path = plot_risk_vs_width(results, path=os.path.join(CONFIG['img_dir'], 'risk_vs_width.png'))
    print(f"Saved {path}")
    return results


if __name__ == "__main__":
    main()
