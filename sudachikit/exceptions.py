"""
Custom exceptions for the sudachikit package.

Every failure surfaced by SudachiPy or by reading a configuration file is
translated into exactly one of the classes below before it leaves the
package. Each exception keeps the underlying diagnostic text verbatim in
its ``message`` attribute.
"""


class SudachiKitError(Exception):
    """
    Base exception class for all sudachikit-related errors.

    This exception serves as the parent class for the four error kinds and
    can be used to catch any error raised by the sudachikit library.

    Example:
        >>> try:
        ...     tokenizer = Tokenizer.from_dictionary_path("/missing.dic")
        ... except SudachiKitError as e:
        ...     print(f"sudachikit error: {e.message}")
    """

    prefix = "Error"

    def __init__(self, message: str = ""):
        self.message = str(message)
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r})"


class DictionaryLoadError(SudachiKitError):
    """
    Raised when a dictionary cannot be loaded.

    This exception is raised when:
    - The system dictionary file does not exist or cannot be read
    - The dictionary header is corrupt or of an incompatible version
    - A user dictionary cannot be read
    """

    prefix = "Failed to load dictionary"


class ConfigError(SudachiKitError):
    """
    Raised when the optional sudachi.json configuration file cannot be
    read or is not a valid JSON object.
    """

    prefix = "Failed to load config"


class TokenizeError(SudachiKitError):
    """
    Raised when segmentation or result materialization fails during a
    tokenize call.
    """

    prefix = "Tokenization failed"


class InvalidArgument(SudachiKitError):
    """
    Raised when a caller supplies a structurally invalid argument, before
    any I/O is attempted.

    This exception is raised when:
    - The dictionary path is missing or empty
    - The text to tokenize is not a string or is not encodable as UTF-8
    - A segmentation mode or dictionary size is not recognized
    """

    prefix = "Invalid argument"


__all__ = [
    "SudachiKitError",
    "DictionaryLoadError",
    "ConfigError",
    "TokenizeError",
    "InvalidArgument",
]
