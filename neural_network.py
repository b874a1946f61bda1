"""
Feed-forward Neural Network for EvoForage.

A network is a stack of fully connected layers:
  inputs → [hidden layers] → outputs

Every neuron computes  max(0, bias + Σ input_i * weight_i)  (ReLU),
output layer included; callers clamp or interpret the outputs themselves.

There is no training here. Parameters only change by being flattened into
a chromosome, evolved, and rebuilt with `Network.from_weights`.
"""

import numpy as np

from exceptions import ReconstructionError, ShapeError, TopologyError


class LayerTopology:
    """Size of one layer (number of neurons)."""

    __slots__ = ("neurons",)

    def __init__(self, neurons: int):
        self.neurons = neurons

    def __repr__(self):
        return f"LayerTopology({self.neurons})"


def _sizes(layers) -> list:
    """Accept LayerTopology objects or bare ints and return plain ints."""
    sizes = [layer.neurons if isinstance(layer, LayerTopology) else int(layer)
             for layer in layers]
    if len(sizes) < 2:
        raise TopologyError(f"topology needs at least 2 layers, got {len(sizes)}")
    if any(n < 1 for n in sizes):
        raise TopologyError(f"every layer needs at least one neuron: {sizes}")
    return sizes


# ──────────────────────────────────────────────────────────────────────────────
# Neuron
# ──────────────────────────────────────────────────────────────────────────────

class Neuron:
    __slots__ = ("bias", "weights")

    def __init__(self, bias: float, weights):
        self.bias    = float(bias)
        self.weights = np.asarray(weights, dtype=np.float64)

    @classmethod
    def random(cls, rng, input_size: int) -> "Neuron":
        bias    = rng.uniform(-1.0, 1.0)
        weights = [rng.uniform(-1.0, 1.0) for _ in range(input_size)]
        return cls(bias, weights)

    @classmethod
    def from_weights(cls, input_size: int, weights) -> "Neuron":
        """Consume one bias and `input_size` weights from an iterator."""
        try:
            bias    = next(weights)
            values  = [next(weights) for _ in range(input_size)]
        except StopIteration:
            raise ReconstructionError("got not enough weights") from None
        return cls(bias, values)

    def propagate(self, inputs: np.ndarray) -> float:
        if len(inputs) != len(self.weights):
            raise ShapeError(
                f"neuron expects {len(self.weights)} inputs, got {len(inputs)}")
        return max(0.0, self.bias + float(np.dot(inputs, self.weights)))

    def __repr__(self):
        return f"Neuron(bias={self.bias:+.3f}, weights={self.weights.tolist()})"


# ──────────────────────────────────────────────────────────────────────────────
# Layer
# ──────────────────────────────────────────────────────────────────────────────

class Layer:
    __slots__ = ("neurons",)

    def __init__(self, neurons: list):
        self.neurons = neurons

    @classmethod
    def random(cls, rng, input_size: int, output_size: int) -> "Layer":
        return cls([Neuron.random(rng, input_size) for _ in range(output_size)])

    @classmethod
    def from_weights(cls, input_size: int, output_size: int, weights) -> "Layer":
        return cls([Neuron.from_weights(input_size, weights)
                    for _ in range(output_size)])

    @property
    def input_size(self) -> int:
        return len(self.neurons[0].weights)

    def propagate(self, inputs: np.ndarray) -> np.ndarray:
        return np.array([n.propagate(inputs) for n in self.neurons],
                        dtype=np.float64)


# ──────────────────────────────────────────────────────────────────────────────
# Network
# ──────────────────────────────────────────────────────────────────────────────

class Network:
    """
    Ordered list of layers. Layer i maps topology[i] inputs to
    topology[i+1] outputs.
    """

    __slots__ = ("layers",)

    def __init__(self, layers: list):
        self.layers = layers

    @classmethod
    def random(cls, rng, topology) -> "Network":
        """
        Build a network with every bias and weight drawn uniformly from
        [-1, 1] using `rng` (a numpy Generator).
        """
        sizes = _sizes(topology)
        return cls([Layer.random(rng, n_in, n_out)
                    for n_in, n_out in zip(sizes, sizes[1:])])

    @classmethod
    def from_weights(cls, topology, weights) -> "Network":
        """
        Inverse of `weights()`. The genome must hold exactly
        Σ (topology[i] + 1) * topology[i+1] numbers.
        """
        sizes = _sizes(topology)
        it = iter(weights)
        layers = [Layer.from_weights(n_in, n_out, it)
                  for n_in, n_out in zip(sizes, sizes[1:])]

        if next(it, None) is not None:
            raise ReconstructionError("got too many weights")

        return cls(layers)

    @staticmethod
    def genome_length(topology) -> int:
        sizes = _sizes(topology)
        return sum((n_in + 1) * n_out for n_in, n_out in zip(sizes, sizes[1:]))

    # ──────────────────────────────────────────────────────────────────────────

    def propagate(self, inputs) -> np.ndarray:
        """
        Run one forward pass.

        Args:
            inputs: sequence or 1-D array of length topology[0]

        Returns:
            float64 array of length topology[-1], every value >= 0
        """
        values = np.asarray(inputs, dtype=np.float64)
        for layer in self.layers:
            values = layer.propagate(values)
        return values

    def weights(self) -> list:
        """Flatten to [bias, w0, w1, ...] per neuron, neuron then layer order."""
        flat = []
        for layer in self.layers:
            for neuron in layer.neurons:
                flat.append(neuron.bias)
                flat.extend(neuron.weights.tolist())
        return flat

    def topology(self) -> list:
        sizes = [self.layers[0].input_size]
        sizes.extend(len(layer.neurons) for layer in self.layers)
        return sizes

    def summary(self) -> str:
        sizes = self.topology()
        lines = [f"Network {' → '.join(str(s) for s in sizes)} "
                 f"({len(self.weights())} parameters)"]
        for i, layer in enumerate(self.layers):
            for j, n in enumerate(layer.neurons):
                lines.append(f"  L{i}N{j:02d}  b={n.bias:+.3f}  "
                             f"|w|={float(np.abs(n.weights).sum()):.3f}")
        return "\n".join(lines)
