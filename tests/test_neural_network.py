import numpy as np
import pytest

from exceptions import ReconstructionError, ShapeError, TopologyError
from neural_network import Layer, LayerTopology, Network, Neuron


@pytest.fixture
def rng():
    return np.random.default_rng(7)


# ─── Neuron ───────────────────────────────────────────────────────────────────

def test_random_neuron_draws_from_unit_range(rng):
    neuron = Neuron.random(rng, 50)

    assert len(neuron.weights) == 50
    assert -1.0 <= neuron.bias <= 1.0
    assert np.all(np.abs(neuron.weights) <= 1.0)


def test_neuron_propagate_is_relu():
    neuron = Neuron(0.5, [-0.3, 0.8])

    assert neuron.propagate(np.array([-10.0, -10.0])) == 0.0
    assert neuron.propagate(np.array([0.5, 1.0])) == pytest.approx(
        (-0.3 * 0.5) + (0.8 * 1.0) + 0.5)


def test_neuron_rejects_wrong_input_length():
    neuron = Neuron(0.0, [1.0, 1.0])
    with pytest.raises(ShapeError):
        neuron.propagate(np.array([1.0, 2.0, 3.0]))


# ─── Layer ────────────────────────────────────────────────────────────────────

def test_layer_propagate():
    layer = Layer([
        Neuron(0.5, [-0.3, 0.8]),
        Neuron(0.2, [0.2, -0.4]),
    ])

    assert layer.propagate(np.array([-10.0, -10.0])) == pytest.approx([0.0, 2.2])
    assert layer.propagate(np.array([0.7, 0.8])) == pytest.approx([
        (-0.3 * 0.7) + (0.8 * 0.8) + 0.5,
        (0.2 * 0.7) + (-0.4 * 0.8) + 0.2,
    ])


# ─── Network ──────────────────────────────────────────────────────────────────

def test_random_network_shape(rng):
    net = Network.random(rng, [LayerTopology(3), LayerTopology(5), LayerTopology(2)])

    assert net.topology() == [3, 5, 2]
    assert [len(l.neurons) for l in net.layers] == [5, 2]
    assert [l.input_size for l in net.layers] == [3, 5]


def test_network_accepts_plain_int_topology(rng):
    assert Network.random(rng, [4, 1]).topology() == [4, 1]


@pytest.mark.parametrize("topology", [[], [3], [3, 0, 2]])
def test_bad_topology_is_rejected(rng, topology):
    with pytest.raises(TopologyError):
        Network.random(rng, topology)


@pytest.mark.parametrize("topology", [[1, 1], [3, 4, 2], [9, 18, 2], [2, 3, 3, 5]])
def test_propagate_output_length_and_floor(topology):
    rng = np.random.default_rng(123)
    net = Network.random(rng, topology)

    for _ in range(20):
        out = net.propagate(rng.uniform(-5.0, 5.0, size=topology[0]))
        assert len(out) == topology[-1]
        assert np.all(out >= 0.0)


def test_propagate_rejects_wrong_input_length(rng):
    net = Network.random(rng, [3, 2])
    with pytest.raises(ShapeError):
        net.propagate([1.0, 2.0])


def test_propagate_through_two_layers():
    net = Network([
        Layer([Neuron(0.0, [1.0, -1.0]), Neuron(1.0, [0.5, 0.5])]),
        Layer([Neuron(-0.5, [2.0, 1.0])]),
    ])

    # hidden: relu(1 - 3) = 0, relu(1 + 0.5 + 1.5) = 3 → out: relu(-0.5 + 0 + 3)
    assert net.propagate([1.0, 3.0]) == pytest.approx([2.5])


def test_weights_order_is_bias_then_weights():
    net = Network([
        Layer([Neuron(0.1, [0.2, 0.3]), Neuron(0.4, [0.5, 0.6])]),
        Layer([Neuron(0.7, [0.8, 0.9])]),
    ])

    assert net.weights() == pytest.approx([0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9])


def test_genome_length_matches_weights(rng):
    topology = [9, 18, 2]
    net = Network.random(rng, topology)

    assert Network.genome_length(topology) == (9 + 1) * 18 + (18 + 1) * 2
    assert len(net.weights()) == Network.genome_length(topology)


def test_weights_round_trip(rng):
    topology = [4, 6, 3]
    net = Network.random(rng, topology)

    rebuilt = Network.from_weights(topology, net.weights())

    assert rebuilt.weights() == net.weights()
    x = [0.3, 0.1, 0.9, 0.5]
    assert list(rebuilt.propagate(x)) == list(net.propagate(x))


def test_from_weights_too_few():
    with pytest.raises(ReconstructionError):
        Network.from_weights([2, 2], [0.0] * 5)


def test_from_weights_too_many():
    with pytest.raises(ReconstructionError):
        Network.from_weights([2, 2], [0.0] * 7)


def test_from_weights_accepts_iterables():
    net = Network.from_weights([2, 2], (float(i) for i in range(6)))
    assert net.weights() == [0.0, 1.0, 2.0, 3.0, 4.0, 5.0]


def test_random_is_reproducible():
    a = Network.random(np.random.default_rng(99), [5, 3, 2])
    b = Network.random(np.random.default_rng(99), [5, 3, 2])
    assert a.weights() == b.weights()
