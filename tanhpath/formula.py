"""
Closed-form export for single-input, single-output networks.

The trained network is written out as nested tanh() calls, e.g. for 1-2-1:

    y = tanh(w3*tanh(w1*x+b1)+w4*tanh(w2*x+b2)+b3)

No simplification is attempted, so the text grows with every layer.
"""

import math
import re
from pathlib import Path
from typing import Callable, List

import numpy as np

from .exceptions import UnsupportedShape

WOLFRAM_HEADER = "Paste this formula into https://www.wolframalpha.com/"

# repr() switches to exponent notation below 1e-4
EXPONENT_NUMBER = re.compile(r"\d+(?:\.\d+)?e[+-]?\d+")


def _number(value) -> str:
    # repr round-trips exactly, so the formula reproduces predict()
    return repr(float(value))


def _positional(match) -> str:
    return np.format_float_positional(float(match.group(0)), unique=True, trim='-')


def _check_shape(network):
    if network.input_dim != 1 or network.output_dim != 1:
        raise UnsupportedShape()


def closed_form(network) -> str:
    """
    Expand a network into a 'y = ...' formula in x.

    Args:
        network: Network with layer_sizes, weights and biases

    Returns:
        Formula string

    Raises:
        UnsupportedShape: network does not have exactly 1 input and 1 output
    """
    _check_shape(network)
    sizes = network.layer_sizes

    values = {"0-0": "x"}

    for layer in range(1, len(sizes)):
        superseded = []

        for neuron in range(sizes[layer]):
            terms = []
            for prev in range(sizes[layer - 1]):
                key = f"{layer - 1}-{prev}"
                if key not in superseded:
                    superseded.append(key)
                weight = network.weights[layer - 1][neuron][prev]
                terms.append(f"{_number(weight)}*{values[key]}")

            bias = network.biases[layer - 1][neuron]
            values[f"{layer}-{neuron}"] = f"tanh({'+'.join(terms)}+{_number(bias)})"

        # Each new layer embeds the previous one
        for key in superseded:
            del values[key]

    formula = f"y = {values[f'{len(sizes) - 1}-0']}"
    return formula.replace("+-", "-").replace("++", "+")


def closed_form_function(network) -> Callable[[float], float]:
    """
    Plain function of x computing the closed form term by term.

    The parameters are copied, so later training does not change the
    returned function. Sums run in the same order as the formula text.

    Raises:
        UnsupportedShape: network does not have exactly 1 input and 1 output
    """
    _check_shape(network)
    biases = [[float(b) for b in layer] for layer in network.biases]
    weights = [[[float(w) for w in row] for row in layer] for layer in network.weights]

    def evaluate(x: float) -> float:
        values = [float(x)]
        for layer_biases, layer_weights in zip(biases, weights):
            values = [
                math.tanh(sum(w * v for w, v in zip(row, values)) + bias)
                for row, bias in zip(layer_weights, layer_biases)
            ]
        return values[0]

    return evaluate


def wolfram_alpha(formula: str) -> str:
    """
    Formula text ready to paste into Wolfram|Alpha.

    Numbers in exponent notation are written out positionally, since
    Wolfram|Alpha reads '1e-05' as 1*e - 5.
    """
    text = EXPONENT_NUMBER.sub(_positional, formula).replace('tanh(', 'TanH(')
    return f"{WOLFRAM_HEADER}\n{text}\n"


def python_source(network, name: str = "closed_form") -> str:
    """
    Standalone Python function computing the same curve as the network.

    Raises:
        UnsupportedShape: network does not have exactly 1 input and 1 output
    """
    formula = closed_form(network)
    return (
        "from math import tanh\n"
        "\n"
        "\n"
        f"def {name}(x):\n"
        f"    # {network.describe()}\n"
        f"    {formula}\n"
        "    return y\n"
    )


def export_formulas(registry, directory, verbose: bool = False) -> List[Path]:
    """
    Write formula-{id}.txt (Wolfram|Alpha) and formula-{id}.py for every network.

    Networks without a single input and output are skipped.

    Returns:
        Paths written
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)

    written = []
    for network in registry:
        try:
            formula = closed_form(network)
        except UnsupportedShape as exc:
            if verbose:
                print(f"  Network {network.id} ({network.describe()}): {exc}")
            continue

        text_path = directory / f"formula-{network.id}.txt"
        text_path.write_text(wolfram_alpha(formula))

        code_path = directory / f"formula-{network.id}.py"
        code_path.write_text(python_source(network))

        written.extend([text_path, code_path])
        if verbose:
            print(f"  Network {network.id} ({network.describe()}): {text_path.name}, {code_path.name}")

    return written
