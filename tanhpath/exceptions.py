"""
Errors raised by tanhpath networks.

A missing parameter file is not an error: Network.load() simply returns False.
"""


class TanhPathError(ValueError):
    """Base class for tanhpath errors."""


class InvalidArchitecture(TanhPathError):
    """Layer sizes cannot form a feedforward network."""


class ParameterCountMismatch(TanhPathError):
    """Stored parameter count does not match the network shape."""

    def __init__(self, network_id: int, expected: int, found: int):
        self.network_id = network_id
        self.expected = expected
        self.found = found
        super().__init__(
            f"Network {network_id}: expected {expected} parameters, found {found}. "
            f"The saved file was most likely written by a different architecture."
        )


class UnsupportedShape(TanhPathError):
    """Closed form only exists for one input and one output."""

    def __init__(self, message: str = "Formula created for 1 input, 1 output"):
        super().__init__(message)
