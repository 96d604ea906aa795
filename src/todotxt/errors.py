"""Exceptions raised by todotxt.

Parsing never raises. These cover caller mistakes: bad annotation entries
and unusable environment configuration.
"""


class TodoTxtError(Exception):
    """Base class for all todotxt errors."""


class InvalidAnnotationError(TodoTxtError, ValueError):
    """A context or project entry is not ``<marker><word>``."""

    def __init__(self, value: object, marker: str):
        self.value = value
        self.marker = marker
        super().__init__(f"Invalid annotation {value!r}: expected '{marker}' followed by word characters")


class ConfigurationError(TodoTxtError):
    """An environment variable holds a value that cannot be used."""
