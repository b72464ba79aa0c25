"""Configuration error hierarchy.

All resolution failures inherit from ConfigError so process bootstrap code
can catch a single type, report it and exit. A resolver never returns a
partial configuration alongside an error.
"""


class ConfigError(Exception):
    """Base exception for all configuration resolution errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigLoadError(ConfigError):
    """Raised when the configuration file is missing, unreadable or malformed."""

    def __init__(self, message: str, path: str) -> None:
        self.path = path
        super().__init__(message)


class ConfigParseError(ConfigError):
    """Raised when an environment variable cannot be coerced to its field type."""

    def __init__(self, message: str, variable: str) -> None:
        self.variable = variable
        super().__init__(message)


class ConfigValidationError(ConfigError):
    """Raised when the merged configuration fails structural or semantic checks."""

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        super().__init__(message)
