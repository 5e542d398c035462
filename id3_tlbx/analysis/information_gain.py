"""Information gain of every attribute of a dataset."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Self

import pandas as pd

from .base_analyser import BaseAnalyser


if TYPE_CHECKING:
    from id3_tlbx.data.entries import Entries


@dataclass(frozen=True)
class InformationGainResult:
    """Information gain outputs grouped for plotting and reporting.

    Attributes:
        dataset_entropy: Entropy E(S) of the class distribution.
        gains: DataFrame with columns `attribute_id`, `attribute`, `average_entropy`, `information_gain`,
            one row per attribute in attribute id order.
        best_attribute_id: Attribute chosen by ID3 (highest gain, lowest id among ties).
        best_attribute: Column name of the chosen attribute.
        pretty_by_col: Mapping from attribute names to presentation labels.
    """

    dataset_entropy: float
    gains: pd.DataFrame
    best_attribute_id: int
    best_attribute: str
    pretty_by_col: dict[str, str]

    def plot_gains(self, **kwargs: object):
        """Plot the information gain per attribute using the plotting helper."""
        from id3_tlbx.plotting.gain_plots import plot_information_gains  # noqa: PLC0415

        return plot_information_gains(self, **kwargs)


class InformationGainAnalyzer(BaseAnalyser):
    r"""Analyzer tabulating :math:`Gain(A) = E(S) - I(A)` for every attribute.

    Example:
        >>> from id3_tlbx.data import Entries
        >>> res = Entries.from_csv().make_information_gain_analyzer().fit().result()
        >>> res.best_attribute
        'outlook'
        >>> res.gains.round(3)
           attribute_id    attribute  average_entropy  information_gain
        0             0      outlook            0.694             0.247
        1             1  temperature            0.911             0.029
        2             2     humidity            0.788             0.152
        3             3         wind            0.892             0.048
    """

    def __init__(self, entries: "Entries") -> None:
        """Initialize the analyzer with the table to evaluate."""
        self._entries = entries
        self._dataset_entropy: float | None = None
        self._gains: pd.DataFrame | None = None
        self._best_attribute_id: int | None = None

    def fit(self) -> Self:
        """Compute E(S), I(A) and Gain(A) for all attributes.

        Raises:
            ValueError: If the dataset is empty or has no attribute columns.
        """
        entries = self._entries
        if entries.is_empty():
            raise ValueError("Cannot compute information gains for an empty dataset.")
        if entries.num_attributes == 0:
            raise ValueError("Dataset has no attribute columns.")

        self._dataset_entropy = entries.calculate_entropy_of_classes()
        gains = entries.information_gains()
        self._gains = pd.DataFrame(
            {
                "attribute_id": gains.index.to_numpy(),
                "attribute": entries.attribute_names,
                "average_entropy": self._dataset_entropy - gains.to_numpy(),
                "information_gain": gains.to_numpy(),
            },
        )
        self._best_attribute_id = entries.get_attribute_with_highest_information_gain()
        return self

    def result(self) -> InformationGainResult:
        """Return packaged results.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        if self._gains is None or self._dataset_entropy is None or self._best_attribute_id is None:
            raise ValueError("Must call fit() before result()")

        return InformationGainResult(
            dataset_entropy=self._dataset_entropy,
            gains=self._gains,
            best_attribute_id=self._best_attribute_id,
            best_attribute=self._entries.attribute_name(self._best_attribute_id),
            pretty_by_col={name: self._entries.get_pretty_name(name) for name in self._entries.attribute_names},
        )
