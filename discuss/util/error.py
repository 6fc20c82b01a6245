"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Settings are inconsistent or incomplete."""

    pass


class DependencyInjectionError(UtilError):
    """A provider could not be selected for a component."""

    pass
