r"""Shannon entropy and conditional (average information) entropy.

Both functions are pure and operate on plain sequences, so they can be used
without an :class:`~id3_tlbx.data.entries.Entries` table.
"""

from collections.abc import Iterable, Sequence

import numpy as np

from id3_tlbx.errors import ErrorKind, ID3Error


PROBABILITY_SUM_TOLERANCE: float = 1e-9
"""Allowed absolute deviation of a distribution's sum from 1."""


def calculate_entropy(
    probabilities: Sequence[float] | np.ndarray,
    *,
    tolerance: float = PROBABILITY_SUM_TOLERANCE,
) -> float:
    r"""Compute the Shannon entropy of a probability distribution in bits.

    :math:`H = -\sum_i p_i \log_2 p_i` with the convention :math:`0 \cdot \log_2 0 = 0`.

    Args:
        probabilities: ``P(class 0) = probabilities[0]``, ``P(class 1) = probabilities[1]`` and so on.
            For example three apple shapes with probabilities ``[0.5, 0.3, 0.2]``.
        tolerance: Allowed absolute deviation of the sum from 1.

    Returns:
        The entropy, in :math:`[0, \log_2 k]` for ``k`` outcomes.

    Raises:
        ID3Error: With ``ErrorKind.INVALID_PROBABILITY_SUM`` if the probabilities do not sum to 1.
        ValueError: If a probability lies outside ``[0, 1]``.
    """
    p = np.asarray(probabilities, dtype=float)

    if not np.all(np.isfinite(p)):
        raise ID3Error(
            ErrorKind.INVALID_PROBABILITY_SUM,
            f"Probabilities must be finite, got {p.tolist()}.",
        )
    total = float(p.sum())
    if not abs(total - 1.0) <= tolerance:
        raise ID3Error(
            ErrorKind.INVALID_PROBABILITY_SUM,
            f"Sum of all probabilities is {total!r}, expected 1 (tolerance {tolerance:g}).",
        )
    if np.any((p < 0.0) | (p > 1.0)):
        raise ValueError(f"Probabilities must lie in [0, 1], got {p.tolist()}.")

    nonzero = p[p > 0.0]
    # log2(1/p) keeps a degenerate distribution at +0.0 instead of -0.0
    return float(np.sum(nonzero * np.log2(1.0 / nonzero)))


def calculate_average_information_entropy(
    total_count: int,
    count_entropy_pairs: Iterable[tuple[int, float]],
) -> float:
    r"""Compute the average information entropy of an attribute.

    For an attribute ``outlook`` with values rainy, overcast and sunny:

    .. code-block:: text

        I(outlook) = |rainy| / |S| * E(outlook=rainy)
                   + |overcast| / |S| * E(outlook=overcast)
                   + |sunny| / |S| * E(outlook=sunny)

    Args:
        total_count: Number of entries in the dataset being split.
        count_entropy_pairs: One ``(count, entropy)`` pair per attribute value.

    Returns:
        The weighted entropy :math:`\sum_v \frac{|S_v|}{|S|} E(S_v)`.

    Raises:
        ID3Error: With ``ErrorKind.INVALID_ENTRY_COUNT`` if a count is negative or exceeds ``total_count``.
    """
    pairs = list(count_entropy_pairs)
    for count, _ in pairs:
        if count < 0:
            raise ID3Error(ErrorKind.INVALID_ENTRY_COUNT, f"The number of entries cannot be negative ({count}).")
        if count > total_count:
            raise ID3Error(
                ErrorKind.INVALID_ENTRY_COUNT,
                f"The number of entries for specific attribute value ({count}) cannot be higher than "
                f"the total number of entries ({total_count}).",
            )

    if not pairs or total_count == 0:
        return 0.0

    counts = np.array([count for count, _ in pairs], dtype=float)
    entropies = np.array([entropy for _, entropy in pairs], dtype=float)
    return float(np.dot(counts / total_count, entropies))


__all__ = [
    "PROBABILITY_SUM_TOLERANCE",
    "calculate_average_information_entropy",
    "calculate_entropy",
]
