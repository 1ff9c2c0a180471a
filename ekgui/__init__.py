"""Input bindings, deferred task dispatch and colour themes for a GUI toolkit."""

__version__ = "0.1.0"

__all__ = ["__version__"]