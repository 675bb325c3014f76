"""Conversion error taxonomy.

Every failure surfaces as a single ``ConversionError`` naming the stage
that failed. The layout engine contributes no error kind of its own.
"""


class ConversionError(Exception):
    """Base exception for all conversion failures."""

    stage = "conversion"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown conversion error occurred."


class InvalidInputError(ConversionError):
    """Raised when the input path is missing or is not a .docx file."""

    stage = "input"

    @property
    def default_message(self) -> str:
        return "Invalid input file."


class ExtractionError(ConversionError):
    """Raised when the document container cannot be opened or read."""

    stage = "extract"

    @property
    def default_message(self) -> str:
        return "Could not read the document container."


class ParseError(ConversionError):
    """Raised when the document structure is malformed."""

    stage = "parse"

    @property
    def default_message(self) -> str:
        return "Malformed document structure."


class EmitError(ConversionError):
    """Raised when the PDF cannot be serialized or written."""

    stage = "emit"

    @property
    def default_message(self) -> str:
        return "Could not write the output document."
