class WordgridError(Exception):
    """Base class for errors raised while building a lexicon or a board."""


class InvalidDimensions(WordgridError, ValueError):
    """Board data does not fill an N x N grid."""

    def __init__(self, length: int, n: int):
        self.length = length
        self.n = n
        super().__init__(f"Board data must be {n}x{n}={n * n} characters, got {length}")


class SourceUnavailable(WordgridError, OSError):
    """A word list could not be opened or read."""
