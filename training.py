import numpy as np
import torch
from tqdm import tqdm
from config import ConfigurationError, validate_width
from models import ShallowNN


class ConvergenceError(RuntimeError):
    """Raised when training diverges, or fails to converge and strict mode is on"""


def _to_column_tensor(values):
    return torch.as_tensor(np.asarray(values, dtype=np.float32).reshape(-1, 1))


def train_network(X, y, hidden_width, activation='tanh', max_steps=100000, threshold=0.01,
                  learning_rate=0.01, seed=None, strict=False, progress=True):
    """Fit a one-hidden-layer network with full-batch resilient backpropagation.

    Minimises the sum-of-squares error 0.5 * sum((f(x) - y)^2) with Rprop and
    stops once the largest absolute partial derivative of the error drops below
    ``threshold``. If that does not happen within ``max_steps`` steps the fit is
    returned as is with ``history['converged'] = False``, or ConvergenceError is
    raised when ``strict`` is set. A non-finite error always raises.

    Returns (model, history) where history holds 'losses' (one per error
    evaluation), 'steps' (Rprop updates taken), 'converged' and 'max_gradient'.
    """
    validate_width(hidden_width)
    if max_steps < 1:
        raise ConfigurationError(f"max_steps must be >= 1, got {max_steps}")
    if threshold <= 0:
        raise ConfigurationError(f"threshold must be > 0, got {threshold}")

    X_tensor = _to_column_tensor(X)
    y_tensor = _to_column_tensor(y)
    if X_tensor.shape[0] != y_tensor.shape[0]:
        raise ValueError(f"X and y differ in length ({X_tensor.shape[0]} vs {y_tensor.shape[0]})")

    if seed is not None:
        torch.manual_seed(seed)
    model = ShallowNN(width=hidden_width, activation=activation)
    optimizer = torch.optim.Rprop(model.parameters(), lr=learning_rate)

    losses = []
    steps = 0
    converged = False
    max_gradient = float('inf')

    for step in tqdm(range(max_steps), desc=f"Rprop Training (width {hidden_width})",
                     disable=not progress):
        optimizer.zero_grad()
        loss = 0.5 * ((model(X_tensor) - y_tensor) ** 2).sum()
        if not torch.isfinite(loss):
            raise ConvergenceError(
                f"Training diverged at step {step} for width {hidden_width} (error = {loss.item()})"
            )
        loss.backward()
        losses.append(loss.item())

        max_gradient = max(p.grad.abs().max().item() for p in model.parameters())
        if max_gradient < threshold:
            converged = True
            break

        optimizer.step()
        steps += 1

    history = {
        'losses': losses,
        'steps': steps,
        'converged': converged,
        'max_gradient': max_gradient,
    }

    if converged:
        if progress:
            print(f"Width {hidden_width} converged after {history['steps']} steps (error {losses[-1]:.6f})")
    else:
        message = (f"Width {hidden_width} did not converge within {max_steps} steps "
                   f"(max |gradient| {max_gradient:.4g} >= threshold {threshold})")
        if strict:
            raise ConvergenceError(message)
        print(f"Warning: {message}")

    return model, history


def predict(model, X):
    """Evaluate a trained model at the given inputs, returns a flat numpy array"""
    with torch.no_grad():
        return model(_to_column_tensor(X)).numpy().flatten().astype(float)
