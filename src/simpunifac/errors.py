"""Exception types for the SimpUNIFAC pipeline.

Every error carries the process exit code the CLI uses when it stops on it.
"""

from __future__ import annotations


class SimpUnifacError(Exception):
    """Base class for all pipeline and shell failures."""

    exit_code = 1


class InputFileError(SimpUnifacError):
    """Raised when the input document cannot be read."""

    exit_code = 3


class DocumentSyntaxError(SimpUnifacError):
    """Raised when the document does not have the mixture shape."""

    exit_code = 4


class GroupTokenError(SimpUnifacError):
    """Raised for a malformed ``"<id>:<count>"`` token."""

    exit_code = 5

    def __init__(self, message: str, token: str | None = None, substance: str | None = None):
        super().__init__(message)
        self.token = token
        self.substance = substance


class GroupSemanticError(SimpUnifacError):
    """Raised when the activity model rejects a well-formed group."""

    exit_code = 6

    def __init__(self, message: str, token: str | None = None, substance: str | None = None):
        super().__init__(message)
        self.token = token
        self.substance = substance


class ModelError(SimpUnifacError):
    """Raised when the activity model fails to compute coefficients."""

    exit_code = 7


class MissingCoefficientError(SimpUnifacError):
    """Raised when a computed substance comes back without a gamma."""

    exit_code = 8


class SerializationError(SimpUnifacError):
    """Raised when the output document cannot be encoded."""

    exit_code = 9


class OutputFileError(SimpUnifacError):
    """Raised when the output document cannot be written."""

    exit_code = 10
