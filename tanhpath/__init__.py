"""
tanhpath - Tanh networks trained online against a piecewise path

Feedforward networks with manual backpropagation, trained one sample at a
time, compared side by side, saved as plain text and exported as
closed-form tanh formulas.

Core components:
- Network: layered tanh network with predict / train_one
- NetworkRegistry: networks of different shapes trained on the same data
- ParameterStore: one plain-text parameter file per network id
- closed_form: network -> 'y = tanh(...)' formula
- Problems: step and ramp paths
"""

from .exceptions import InvalidArchitecture, ParameterCountMismatch, UnsupportedShape, TanhPathError
from .networks import Network, tanh_derivative
from .registry import NetworkRegistry, build_registry
from .store import ParameterStore
from .formula import closed_form, closed_form_function, python_source, wolfram_alpha, export_formulas
from .problems import interpolate_path, step_path_problem, ramp_path_problem, get_path_problem
from .metrics import mse, saturation, format_table

__version__ = "0.1.0"

__all__ = [
    # Networks
    "Network",
    "NetworkRegistry",
    "build_registry",
    "tanh_derivative",
    # Persistence
    "ParameterStore",
    # Formula export
    "closed_form",
    "closed_form_function",
    "python_source",
    "wolfram_alpha",
    "export_formulas",
    # Problems
    "interpolate_path",
    "step_path_problem",
    "ramp_path_problem",
    "get_path_problem",
    # Metrics
    "mse",
    "saturation",
    "format_table",
    # Errors
    "TanhPathError",
    "InvalidArchitecture",
    "ParameterCountMismatch",
    "UnsupportedShape",
]
