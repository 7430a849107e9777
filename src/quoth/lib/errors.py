"""Exceptions raised around the subpath core.

Reference synthesis itself never raises: an empty selection or an
ambiguous subpath is an ordinary ``""``/``None`` result. These classes
cover reading notes and loading quoth.yaml.
"""


class QuothError(Exception):
    """Root of the Quoth exception tree.

    The CLI catches this to turn failures into an exit code.
    """


class ConfigError(QuothError):
    """A setting in quoth.yaml or the environment could not be used.

    Attributes:
        field: Setting (or pseudo-field such as ``yaml_parse``) at fault
        message: What went wrong
    """

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        self.message = message
        super().__init__(f"Configuration error in '{field}': {message}")


class ValidationError(QuothError):
    """A raw value was outside the accepted set.

    Used for ``QUOTH_*`` variables, which are checked before pydantic sees
    them so a bad value can be skipped with a warning.

    Attributes:
        field: Name of the offending setting or variable
        message: Short description
        expected: Accepted values, human readable
        actual: The rejected value
    """

    def __init__(self, field: str, message: str, expected: str, actual: str) -> None:
        self.field = field
        self.message = message
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Validation error in '{field}': {message}\n"
            f"  Expected: {expected}\n"
            f"  Got: {actual}"
        )


class FileNotFoundError(QuothError):
    """A note or config file could not be read.

    Shadows the builtin inside Quoth modules so callers catch one tree.

    Attributes:
        path: The path as given by the caller
        message: Hint for the user
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"File not found: {path}\n{message}")


class DocumentError(QuothError):
    """A note was read but its content could not be used.

    Attributes:
        path: The path as given by the caller
        message: What is wrong with the content
    """

    def __init__(self, path: str, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"Cannot read note {path}: {message}")
