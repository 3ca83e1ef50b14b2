"""Conversion error types."""


class XsdConversionError(ValueError):
    """Base class for errors raised while converting an XSD document."""


class SchemaNotFoundError(XsdConversionError):
    """Raised when the parsed input has no root ``schema`` node."""

    def __init__(self, message: str = "Invalid XSD: root schema element not found"):
        super().__init__(message)


class RootElementNotFoundError(XsdConversionError):
    """Raised when the schema declares no top-level element."""

    def __init__(self, message: str = "No root element to process"):
        super().__init__(message)


class XsdParseError(XsdConversionError):
    """Raised when XSD or XML text is not well formed."""

    def __init__(self, message: str, line: int | None = None):
        super().__init__(message)
        self.line = line
