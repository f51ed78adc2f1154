"""
Feedforward tanh network trained one sample at a time.

Network: layered biases/weights with manual backpropagation (NumPy-based)

A neuron is simply:
    output = tanh(SUM(weight * input) + bias)

Layer 0 is the input and owns no parameters, so biases[l] and weights[l]
belong to layer l + 1.
"""

import numpy as np
from typing import List, Optional, Sequence

from . import config as cfg
from .exceptions import InvalidArchitecture, ParameterCountMismatch
from .formula import closed_form


def tanh_derivative(activation: np.ndarray) -> np.ndarray:
    """
    Derivative of tanh written in terms of its output.

    Backpropagation only keeps post-tanh activations, so this takes
    a = tanh(z) and returns 1 - a^2. Do not pass the pre-activation sum.
    """
    return 1 - activation * activation


class Network:
    """
    Fully connected tanh network with per-sample gradient descent.

    Args:
        network_id: Identity of the network, also the persistence key
        layer_sizes: Neurons per layer, input first and output last (length >= 2)
        learning_rate: Gradient step size, fixed for the network's lifetime
        seed: Seed for the uniform parameter initialisation
        registry: Optional NetworkRegistry to register into under network_id
    """

    def __init__(
        self,
        network_id: int,
        layer_sizes: Sequence[int],
        learning_rate: float = cfg.LEARNING_RATE,
        seed: Optional[int] = None,
        registry=None,
    ):
        # 1 layer => input is output, nothing to feed forward
        if len(layer_sizes) < 2:
            raise InvalidArchitecture(
                f"layer_sizes needs at least 2 layers (input, output), got {list(layer_sizes)}"
            )
        if any(int(size) < 1 for size in layer_sizes):
            raise InvalidArchitecture(f"layer sizes must be positive, got {list(layer_sizes)}")

        self.id = int(network_id)
        self.layer_sizes = tuple(int(size) for size in layer_sizes)
        self.learning_rate = learning_rate

        rng = np.random.default_rng(seed)

        # [layer][neuron], scratch state rewritten by every forward pass
        self._activations = [np.zeros(size) for size in self.layer_sizes]

        # [layer - 1][neuron]
        self.biases = [
            rng.uniform(-cfg.INIT_RANGE, cfg.INIT_RANGE, size)
            for size in self.layer_sizes[1:]
        ]

        # [layer - 1][neuron][neuron in previous layer]
        self.weights = [
            rng.uniform(-cfg.INIT_RANGE, cfg.INIT_RANGE, (size, prev))
            for prev, size in zip(self.layer_sizes[:-1], self.layer_sizes[1:])
        ]

        if registry is not None:
            registry.register(self)

    def __repr__(self) -> str:
        return f"Network(id={self.id}, layers={self.describe()})"

    @property
    def input_dim(self) -> int:
        return self.layer_sizes[0]

    @property
    def output_dim(self) -> int:
        return self.layer_sizes[-1]

    def describe(self) -> str:
        """Layer label, e.g. '1-3-2-1'."""
        return "-".join(str(size) for size in self.layer_sizes)

    def predict(self, inputs) -> np.ndarray:
        """
        Feed forward, inputs >==> outputs.

        Args:
            inputs: Vector of length layer_sizes[0]

        Returns:
            Copy of the output layer activations
        """
        self._activations[0][:] = inputs

        for layer in range(1, len(self.layer_sizes)):
            weighted = self.weights[layer - 1] @ self._activations[layer - 1]
            self._activations[layer] = np.tanh(weighted + self.biases[layer - 1])

        return self._activations[-1].copy()

    def forward(self, inputs) -> List[np.ndarray]:
        """Forward pass returning copies of every layer's activations, input first."""
        self.predict(inputs)
        return [layer.copy() for layer in self._activations]

    def train_one(self, inputs, expected) -> None:
        """
        One backpropagation step on a single (inputs, expected) pair.

        The output layer is updated first. Each hidden layer's error is then
        propagated through the weights of the layer above as they stand after
        that layer's update, working from the output towards the input.

        Args:
            inputs: Vector of length layer_sizes[0]
            expected: Vector of length layer_sizes[-1]
        """
        output = self.predict(inputs)
        expected = np.asarray(expected, dtype=float)
        lr = self.learning_rate
        last = len(self.layer_sizes) - 1

        # Derivative from the tanh output, not the pre-activation sum
        delta = (output - expected) * tanh_derivative(output)

        self.biases[last - 1] -= delta * lr
        self.weights[last - 1] -= np.outer(delta, self._activations[last - 1]) * lr

        for layer in range(last - 1, 0, -1):
            delta = (self.weights[layer].T @ delta) * tanh_derivative(self._activations[layer])

            self.biases[layer - 1] -= delta * lr
            self.weights[layer - 1] -= np.outer(delta, self._activations[layer - 1]) * lr

    def num_params(self) -> int:
        """Total number of biases and weights."""
        return sum(b.size for b in self.biases) + sum(w.size for w in self.weights)

    def parameters(self) -> List[float]:
        """
        Flatten parameters in storage order.

        All biases (layer, then neuron), then all weights (layer, then
        neuron, then neuron in the previous layer).
        """
        values = []
        for bias in self.biases:
            values.extend(float(v) for v in bias)
        for weight in self.weights:
            values.extend(float(v) for v in weight.ravel())
        return values

    def set_parameters(self, values: Sequence[float]) -> None:
        """Inverse of parameters(). Raises ParameterCountMismatch before writing anything."""
        expected = self.num_params()
        if len(values) != expected:
            raise ParameterCountMismatch(self.id, expected, len(values))

        index = 0
        for bias in self.biases:
            bias[:] = values[index:index + bias.size]
            index += bias.size
        for weight in self.weights:
            weight[:] = np.asarray(values[index:index + weight.size], dtype=float).reshape(weight.shape)
            index += weight.size

    def save(self, store) -> None:
        """Write biases and weights to the store slot for this id."""
        store.write(self.id, self.parameters())

    def load(self, store) -> bool:
        """
        Load biases and weights from the store slot for this id.

        Returns:
            False if nothing was saved for this id, True once loaded

        Raises:
            ParameterCountMismatch: saved file belongs to another shape
        """
        values = store.read(self.id)
        if values is None:
            return False
        self.set_parameters(values)
        return True

    def to_closed_form(self) -> str:
        """Expanded 'y = tanh(...)' formula; see formula.closed_form."""
        return closed_form(self)

    def clone(self) -> 'Network':
        """Create a deep copy (not registered anywhere)."""
        new = Network(self.id, self.layer_sizes, learning_rate=self.learning_rate)
        new.biases = [b.copy() for b in self.biases]
        new.weights = [w.copy() for w in self.weights]
        return new
