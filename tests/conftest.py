import matplotlib

matplotlib.use('Agg')

import numpy as np
import pytest
import torch


class ConstantModel:
    """Stand-in for a trained network that always predicts the same value"""
    def __init__(self, value=0.0):
        self.value = value

    def num_parameters(self):
        return 1


def constant_train(X, y, hidden_width, **kwargs):
    history = {'losses': [0.0], 'steps': 0, 'converged': True, 'max_gradient': 0.0}
    return ConstantModel(0.0), history


def constant_predict(model, X):
    return np.full(np.asarray(X).flatten().shape, model.value, dtype=float)


@pytest.fixture
def stub_capability():
    """(train_fn, predict_fn) pair backed by a constant model"""
    return constant_train, constant_predict


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture(autouse=True)
def _seed_torch():
    torch.manual_seed(0)
