"""Exception types raised by the simulation engine."""


class ConfigurationError(ValueError):
    """Raised when configuration is missing or invalid.

    Configuration problems are fatal to starting the simulation: callers must
    fix the configuration instead of retrying or falling back to defaults.
    """
