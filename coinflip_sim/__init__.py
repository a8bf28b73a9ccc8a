"""Coin-flip betting simulation with a text frame loop, input bindings and a rolling buffer."""

__version__ = "0.0.1"
__all__ = ["__version__"]