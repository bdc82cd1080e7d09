class ExtractionError(Exception):
    """Base class for failures while building an example response."""
    pass


class ConfigurationError(ExtractionError):
    """A required annotation is missing or empty."""
    pass


class InstantiationError(ExtractionError):
    """No stage could produce a sample instance for a type identifier."""

    def __init__(self, type_id: str, message: str = ""):
        self.type_id = type_id
        super().__init__(message or f"Unable to instantiate {type_id}")


class RenderingError(ExtractionError):
    """Wrapping a sample in its resource or serializing it failed."""
    pass


class UnknownTypeError(ExtractionError, LookupError):
    """Identifier is not present in the type registry."""

    def __init__(self, type_id: str):
        self.type_id = type_id
        super().__init__(f"No type registered under {type_id!r}")
