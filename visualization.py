import os
import matplotlib.pyplot as plt
import numpy as np
from data import true_function


def _save(path):
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    plt.savefig(path, dpi=300, bbox_inches='tight')
    plt.close()
    return path


def plot_fit(X_train, y_train, X_grid, grid_preds, width, X_test=None, test_preds=None,
             path='img/fit.png'):
    """Plot a fitted network against the noisy training data and the true function"""
    X_grid = np.asarray(X_grid).flatten()
    order = np.argsort(X_grid)

    plt.figure(figsize=(10, 6))
    plt.plot(X_grid[order], true_function(X_grid[order]), 'k--', linewidth=2, label='sin(15x)')
    plt.scatter(np.asarray(X_train).flatten(), np.asarray(y_train).flatten(),
                c='black', s=30, alpha=0.6, label='Training Data')
    plt.plot(X_grid[order], np.asarray(grid_preds).flatten()[order],
             color='blue', linewidth=2, label=f'Network (width {width})')
    if X_test is not None and test_preds is not None:
        plt.scatter(np.asarray(X_test).flatten(), np.asarray(test_preds).flatten(),
                    c='red', marker='x', s=50, label='Test Predictions')
    plt.xlabel('x', fontsize=14)
    plt.ylabel('y', fontsize=14)
    plt.title(f'Fit with {width} Hidden Units', fontsize=16)
    plt.legend(fontsize=12)
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    return _save(path)


def plot_risk_vs_width(results, path='img/risk_vs_width.png'):
    """Plot empirical test risk against hidden-layer width.

    Fits that stopped at the step limit without converging are drawn as
    hollow markers.
    """
    widths = np.array([r.width for r in results])
    risks = np.array([r.risk for r in results])
    converged = np.array([bool(r.converged) for r in results], dtype=bool)

    plt.figure(figsize=(10, 6))
    plt.plot(widths, risks, color='blue', linewidth=1.5, alpha=0.6)
    plt.scatter(widths[converged], risks[converged], color='blue', s=40, label='Converged')
    if (~converged).any():
        plt.scatter(widths[~converged], risks[~converged], facecolors='none',
                    edgecolors='red', s=60, label='Not converged')
    plt.xlabel('Hidden Units', fontsize=14)
    plt.ylabel('Empirical Risk (test MSE)', fontsize=14)
    plt.title('Empirical Risk vs Hidden-Layer Width', fontsize=16)
    plt.legend(fontsize=12)
    plt.grid(True, alpha=0.3)
    plt.tight_layout()
    return _save(path)
