"""
Tests for saving and loading network parameters.
"""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import numpy as np
import pytest

from tanhpath import Network, ParameterStore, ParameterCountMismatch


def test_round_trip(tmp_path):
    """save, then load into a fresh network of the same shape."""
    store = ParameterStore(tmp_path)
    original = Network(3, [1, 3, 2, 1], seed=1)
    for x in np.linspace(-1, 1, 20):
        original.train_one([x], [np.sin(3 * x)])
    original.save(store)

    fresh = Network(3, [1, 3, 2, 1], seed=99)
    assert fresh.load(store) is True

    for x in [-0.8, -0.1, 0.0, 0.45, 0.99]:
        assert abs(fresh.predict([x])[0] - original.predict([x])[0]) < 1e-9


def test_file_layout(tmp_path):
    """One decimal per line, in parameters() order, file named by id."""
    store = ParameterStore(tmp_path)
    net = Network(5, [1, 2, 1], seed=2)
    net.save(store)

    path = tmp_path / "network5.ai"
    assert store.path_for(5) == path
    lines = path.read_text().splitlines()
    assert len(lines) == net.num_params() == 7
    assert [float(line) for line in lines] == net.parameters()


def test_custom_pattern(tmp_path):
    store = ParameterStore(tmp_path / "nested", pattern="model-{id}.txt")
    net = Network(2, [1, 1], seed=0)
    net.save(store)
    assert (tmp_path / "nested" / "model-2.txt").exists()
    assert store.exists(2)
    store.remove(2)
    assert not store.exists(2)


def test_load_missing_is_noop(tmp_path):
    store = ParameterStore(tmp_path)
    net = Network(0, [1, 2, 1], seed=3)
    before = net.parameters()

    assert store.read(0) is None
    assert net.load(store) is False
    assert net.parameters() == before


def test_load_mismatch_leaves_parameters(tmp_path):
    """Another architecture's file is rejected without touching the network."""
    store = ParameterStore(tmp_path)
    Network(0, [1, 2, 1], seed=4).save(store)

    target = Network(0, [1, 3, 1], seed=5)
    before = target.parameters()

    with pytest.raises(ParameterCountMismatch) as excinfo:
        target.load(store)

    assert excinfo.value.expected == 10
    assert excinfo.value.found == 7
    assert target.parameters() == before


def test_overwrite(tmp_path):
    store = ParameterStore(tmp_path)
    net = Network(1, [1, 1], seed=6)
    net.save(store)
    net.train_one([0.5], [0.5])
    net.save(store)
    assert store.read(1) == net.parameters()
