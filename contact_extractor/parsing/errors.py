"""Exceptions raised while turning uploaded documents into text."""


class ExtractionError(Exception):
    """Base class for document extraction failures."""

    pass


class DocumentValidationError(ExtractionError):
    """Raised when input is rejected before decoding is attempted.

    Covers unsupported or missing formats, empty files and files above
    the configured size limit.
    """

    pass


class DecodeError(ExtractionError):
    """Raised when a decoder cannot parse the document.

    The message carries the underlying decoder's error. Extraction is
    all-or-nothing, so no partial text accompanies this error.
    """

    pass
