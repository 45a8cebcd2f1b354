import torch
import torch.nn as nn
import numpy as np
from config import ConfigurationError, validate_width

ACTIVATIONS = {
    'tanh': torch.tanh,
    'logistic': torch.sigmoid,
    'relu': torch.relu,
}


class ShallowNN(nn.Module):
    """Feedforward network with a single hidden layer, scalar in and out"""
    def __init__(self, width, activation='tanh'):
        super(ShallowNN, self).__init__()
        validate_width(width)
        if activation not in ACTIVATIONS:
            raise ConfigurationError(
                f"Unknown activation {activation!r}; expected one of {sorted(ACTIVATIONS)}"
            )
        self.width = width
        self.activation = activation
        self.fc1 = nn.Linear(1, width)
        self.fc2 = nn.Linear(width, 1)

        # N(0, 1/fan_in) weights; hidden biases N(0, 1) so units don't all pass through the origin
        nn.init.normal_(self.fc1.weight, std=1.0)
        nn.init.normal_(self.fc2.weight, std=1.0/np.sqrt(width))
        nn.init.normal_(self.fc1.bias, std=1.0)
        nn.init.zeros_(self.fc2.bias)

    def forward(self, x):
        x = ACTIVATIONS[self.activation](self.fc1(x))
        x = self.fc2(x)
        return x

    def num_parameters(self):
        return sum(p.numel() for p in self.parameters() if p.requires_grad)
