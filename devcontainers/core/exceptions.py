"""Exceptions raised while reading and decoding devcontainer documents."""


class DevContainerError(Exception):
    """Base exception for all devcontainers errors."""

    pass


class FeatureConfigurationError(DevContainerError):
    """Exception raised for an unrecognized optional field group name."""

    pass


class DocumentSyntaxError(DevContainerError):
    """Exception raised when document text is not valid JSON."""

    def __init__(self, message: str, lineno: int = 0, colno: int = 0):
        self.lineno = lineno
        self.colno = colno
        super().__init__(f"{message} (line {lineno}, column {colno})")


class DevContainerFileNotFoundError(DevContainerError):
    """Exception raised when no devcontainer.json can be located."""

    pass


class DocumentReadError(DevContainerError):
    """Exception raised when a devcontainer.json cannot be read as UTF-8 text."""

    pass


def describe_path(path: str) -> str:
    """Render a document path for messages."""
    return path or "<document root>"


class DecodeError(DevContainerError):
    """Base exception for a document that does not fit the schema.

    Every decode error carries the document path of the offending value,
    e.g. ``forwardPorts[2].port`` or ``build.args.VARIANT``.
    """

    def __init__(self, path: str, message: str):
        self.path = path
        super().__init__(f"{describe_path(path)}: {message}")


class TypeMismatchError(DecodeError):
    """Exception raised when a value has the wrong document type."""

    def __init__(self, field: str, expected: str, found: str):
        self.field = field
        self.expected = expected
        self.found = found
        super().__init__(field, f"expected {expected}, found {found}")


class MissingFieldError(DecodeError):
    """Exception raised when a required key is absent."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(field, "required field is missing")


class NoMatchingVariantError(DecodeError):
    """Exception raised when a value fits none of a union's shapes."""

    def __init__(self, field: str, found: str = ""):
        self.field = field
        self.found = found
        message = "value matches no accepted shape"
        if found:
            message += f" (found {found})"
        super().__init__(field, message)


class UnknownFieldError(DecodeError):
    """Exception raised for an unrecognized key while unknown fields are rejected."""

    def __init__(self, path: str):
        super().__init__(path, "unknown field")


class DuplicateKeyError(DecodeError):
    """Exception raised when an object repeats a key."""

    def __init__(self, path: str):
        super().__init__(path, "duplicate key")
