"""Errors raised by divergent."""


class DivergentError(Exception):
    """Base class for divergent errors."""
    pass


class ConfigurationError(DivergentError, ValueError):
    """Invalid colormap domain, endpoint color, preset or sampling request."""
    pass


class NotConfiguredError(DivergentError, RuntimeError):
    """Colormap evaluated before both endpoint colors were set."""
    pass
