"""
Errors raised while loading fixed-wing parameters from configuration.

All load failures derive from ParameterLoadError so callers that want to
fall back to the default parameter set can catch a single type.
"""

from typing import Optional


class ParameterLoadError(ValueError):
    """Base class for configuration load failures."""

    def __init__(self, message: str, key: Optional[str] = None):
        super().__init__(message)
        self.key = key


class MissingKeyError(ParameterLoadError, KeyError):
    """A required entry is absent from the configuration document."""

    def __init__(self, key: str):
        super().__init__(f"Missing configuration key: '{key}'", key)

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class TypeMismatchError(ParameterLoadError, TypeError):
    """An entry is present but cannot be converted to the field type."""

    def __init__(self, key: str, expected: str, value=None):
        super().__init__(
            f"Configuration key '{key}' expects {expected}, "
            f"got {type(value).__name__} ({value!r})",
            key
        )
        self.expected = expected
        self.value = value


class DimensionMismatchError(ParameterLoadError):
    """A vector entry has a length different from the field's fixed size."""

    def __init__(self, key: str, expected: int, actual: int):
        super().__init__(
            f"Configuration key '{key}' expects a vector of length {expected}, "
            f"got length {actual}",
            key
        )
        self.expected = expected
        self.actual = actual
