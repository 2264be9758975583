"""Encoding error raised by strict slash-path conversion."""


class EncodingError(ValueError):
    """Raised when a native path cannot be represented as valid Unicode text.

    Only the strict encoders raise this. Callers either fall back to the lossy
    variant or report the path as not valid Unicode.
    """

    def __init__(self, text: str, position: int | None = None):
        self.text = text
        self.position = position
        message = f"Path is not valid Unicode: {text!r}"
        if position is not None:
            message += f" (first invalid unit at index {position})"
        super().__init__(message)
