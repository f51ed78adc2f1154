"""
Ordered collection of networks trained side by side on the same data.

The registry is owned by whoever drives training; nothing here is global.
"""

import numpy as np
from typing import Dict, Iterator, List, Optional, Sequence

from . import config as cfg
from .exceptions import ParameterCountMismatch, UnsupportedShape
from .formula import closed_form
from .networks import Network
from .problems import as_rows


class NetworkRegistry:
    """
    Networks keyed by id, always iterated in ascending id order.

    Registering an id that already exists replaces the old network.
    """

    def __init__(self):
        self._networks: Dict[int, Network] = {}
        self._in_pass = False

    def __len__(self) -> int:
        return len(self._networks)

    def __contains__(self, network_id: int) -> bool:
        return network_id in self._networks

    def __getitem__(self, network_id: int) -> Network:
        return self._networks[network_id]

    def __iter__(self) -> Iterator[Network]:
        for network_id in self.ids():
            yield self._networks[network_id]

    def ids(self) -> List[int]:
        return sorted(self._networks)

    def register(self, network: Network) -> Network:
        self._networks[network.id] = network
        return network

    def clear(self) -> None:
        self._networks.clear()

    @property
    def in_pass(self) -> bool:
        return self._in_pass

    def train_pass(self, X: np.ndarray, y: np.ndarray) -> bool:
        """
        Train every network once on every sample, in order.

        Args:
            X: Inputs, shape (n_samples,) or (n_samples, input_dim)
            y: Targets, shape (n_samples,) or (n_samples, output_dim)

        Returns:
            False if a pass was already running (nothing trained), True otherwise
        """
        if self._in_pass:
            return False

        inputs = as_rows(X)
        targets = as_rows(y)

        self._in_pass = True
        try:
            for network in self:
                for index in range(len(inputs)):
                    network.train_one(inputs[index], targets[index])
        finally:
            self._in_pass = False
        return True

    def predict_curves(self, xs: Sequence[float]) -> Dict[int, np.ndarray]:
        """First output of every network across xs."""
        curves = {}
        for network in self:
            curves[network.id] = np.array([network.predict([x])[0] for x in xs])
        return curves

    def save_all(self, store) -> None:
        for network in self:
            network.save(store)

    def load_all(self, store, verbose: bool = False) -> Dict[int, str]:
        """
        Load every network from the store.

        A mismatched file leaves that network as it was and the rest still load.

        Returns:
            Per id: 'loaded', 'missing' or the mismatch message
        """
        outcome = {}
        for network in self:
            try:
                outcome[network.id] = "loaded" if network.load(store) else "missing"
            except ParameterCountMismatch as exc:
                outcome[network.id] = str(exc)
            if verbose:
                print(f"  Network {network.id} ({network.describe()}): {outcome[network.id]}")
        return outcome

    def formulas(self) -> Dict[int, str]:
        """Closed form per network, or the unsupported-shape message."""
        result = {}
        for network in self:
            try:
                result[network.id] = closed_form(network)
            except UnsupportedShape as exc:
                result[network.id] = str(exc)
        return result


def build_registry(
    architectures: Sequence[Sequence[int]] = cfg.ARCHITECTURES,
    seed: Optional[int] = None,
    learning_rate: float = cfg.LEARNING_RATE,
) -> NetworkRegistry:
    """
    Create one network per architecture, ids 0..n-1 in list order.

    Args:
        architectures: Layer sizes per network
        seed: Base seed; network i is seeded with seed + i
        learning_rate: Shared learning rate

    Returns:
        Populated registry
    """
    registry = NetworkRegistry()
    for network_id, layer_sizes in enumerate(architectures):
        Network(
            network_id,
            layer_sizes,
            learning_rate=learning_rate,
            seed=None if seed is None else seed + network_id,
            registry=registry,
        )
    return registry
