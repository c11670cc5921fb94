"""Error kinds raised by graft actions and their collaborators."""

from __future__ import annotations


class GraftError(Exception):
    """Base for every failure the CLI reports as ``Error: ...``."""


class MissingInputError(GraftError, LookupError):
    """A required input (e.g. ``library``) was not supplied."""


class ConfigurationError(GraftError, ValueError):
    """The project configuration is unreadable or references an unknown project."""


class PackageManagerNotFoundError(GraftError, LookupError):
    """No usable package manager could be determined."""


class RunnerError(GraftError, RuntimeError):
    """An external command could not be started or exited non-zero."""


class InstallError(GraftError, RuntimeError):
    """The package manager rejected an install."""


class GenerationError(GraftError, RuntimeError):
    """A schematic failed while generating code."""
