"""Exceptions raised by CompositeTreeLib.

Only programming errors raise. A path that does not resolve is reported
as ``None`` and removing an absent node is a no-op, so neither has an
exception here.
"""


class CompositeTreeError(Exception):
    """Base class for all library exceptions."""
    pass


class UnknownStrategyError(CompositeTreeError, ValueError):
    """Raised when a traversal strategy name is not recognized."""
    pass


class ConfigError(CompositeTreeError, ValueError):
    """Raised when a configuration object fails validation."""
    pass
