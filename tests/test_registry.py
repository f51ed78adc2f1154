"""
Tests for NetworkRegistry and the side-by-side training pass.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np

from tanhpath import Network, NetworkRegistry, ParameterStore, build_registry, step_path_problem
from tanhpath import config as cfg


def test_build_registry():
    registry = build_registry(seed=42)
    assert len(registry) == len(cfg.ARCHITECTURES)
    assert registry.ids() == list(range(len(cfg.ARCHITECTURES)))
    for network, sizes in zip(registry, cfg.ARCHITECTURES):
        assert network.layer_sizes == tuple(sizes)
    assert [n.describe() for n in registry][:3] == ["1-1", "1-1-1", "1-2-1"]

    again = build_registry(seed=42)
    assert registry[4].parameters() == again[4].parameters()


def test_register_replaces_and_orders():
    registry = NetworkRegistry()
    Network(5, [1, 2, 1], seed=0, registry=registry)
    Network(1, [1, 1], seed=0, registry=registry)
    replacement = Network(5, [1, 4, 1], seed=0, registry=registry)

    assert len(registry) == 2
    assert 5 in registry and 3 not in registry
    assert registry[5] is replacement
    assert [n.id for n in registry] == [1, 5]

    registry.clear()
    assert len(registry) == 0


def test_train_pass_matches_manual_training():
    """Each network sees every sample once, in order."""
    X, y = step_path_problem(points_per_segment=5)
    registry = build_registry(architectures=[(1, 2, 1), (1, 3, 2, 1)], seed=7)
    manual = [network.clone() for network in registry]

    assert registry.train_pass(X, y) is True

    for network in manual:
        for xi, yi in zip(X, y):
            network.train_one([xi], [yi])
    for trained, expected in zip(registry, manual):
        assert trained.parameters() == expected.parameters()


def test_train_pass_not_reentrant():
    """A pass started while another is running does nothing."""
    registry = NetworkRegistry()
    nested_results = []

    class NestedNetwork(Network):
        def train_one(self, inputs, expected):
            nested_results.append(registry.train_pass([0.0], [0.0]))
            super().train_one(inputs, expected)

    NestedNetwork(0, [1, 2, 1], seed=0, registry=registry)
    assert registry.train_pass([0.1, 0.2], [0.3, 0.4]) is True
    assert nested_results == [False, False]
    assert registry.in_pass is False


def test_predict_curves():
    registry = build_registry(architectures=[(1, 1), (1, 3, 1)], seed=1)
    xs = np.linspace(-1, 1, 11)
    curves = registry.predict_curves(xs)
    assert sorted(curves) == [0, 1]
    assert curves[1].shape == (11,)
    assert curves[1][3] == registry[1].predict([xs[3]])[0]


def test_save_and_load_all(tmp_path):
    store = ParameterStore(tmp_path)
    registry = build_registry(architectures=[(1, 1), (1, 2, 1), (1, 3, 1)], seed=3)
    registry.save_all(store)
    store.remove(2)

    # id 1 now gets a file from a different shape
    Network(1, [1, 4, 1], seed=0).save(store)

    fresh = build_registry(architectures=[(1, 1), (1, 2, 1), (1, 3, 1)], seed=30)
    untouched = fresh[1].parameters()
    outcome = fresh.load_all(store)

    assert outcome[0] == "loaded"
    assert "expected 7 parameters, found 13" in outcome[1]
    assert outcome[2] == "missing"
    assert fresh[0].parameters() == registry[0].parameters()
    assert fresh[1].parameters() == untouched


def test_formulas():
    registry = NetworkRegistry()
    Network(0, [1, 2, 1], seed=0, registry=registry)
    Network(1, [1, 2], seed=0, registry=registry)
    formulas = registry.formulas()
    assert formulas[0].startswith("y = tanh(")
    assert formulas[1] == "Formula created for 1 input, 1 output"
