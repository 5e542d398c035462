"""Error types raised by the entropy engine and the dataset queries."""

from enum import StrEnum


class ErrorKind(StrEnum):
    """Kinds of violated numeric preconditions."""

    INVALID_PROBABILITY_SUM = "invalid_probability_sum"
    INVALID_ENTRY_COUNT = "invalid_entry_count"


class ID3Error(ValueError):
    """Tagged error carrying an :class:`ErrorKind`.

    Callers inspect ``kind`` instead of catching distinct exception classes:

    >>> from id3_tlbx.analysis.entropy import calculate_entropy
    >>> try:
    ...     calculate_entropy([0.5, 0.49])
    ... except ID3Error as err:
    ...     assert err.kind is ErrorKind.INVALID_PROBABILITY_SUM
    """

    def __init__(self, kind: ErrorKind, message: str) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!s}, message={self.message!r})"


__all__ = ["ErrorKind", "ID3Error"]
