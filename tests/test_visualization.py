import numpy as np
from data import generate_training_set, generate_test_set
from experiments import WidthResult
from visualization import plot_fit, plot_risk_vs_width


def test_plot_fit_writes_file(tmp_path):
    X, y = generate_training_set(rng=0)
    grid = np.linspace(0, 1, 50)
    X_test = generate_test_set(10, rng=1)
    path = plot_fit(X, y, grid, np.zeros(50), 4, X_test=X_test, test_preds=np.zeros(10),
                    path=str(tmp_path / 'plots' / 'fit.png'))
    assert (tmp_path / 'plots' / 'fit.png').exists()
    assert path.endswith('fit.png')


def test_plot_risk_vs_width_writes_file(tmp_path):
    results = [WidthResult(w, 1.0 / w, w != 7, 10) for w in range(5, 10)]
    path = plot_risk_vs_width(results, path=str(tmp_path / 'risk.png'))
    assert (tmp_path / 'risk.png').exists()
    assert path == str(tmp_path / 'risk.png')
