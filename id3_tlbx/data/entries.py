"""Immutable categorical table and the ID3 split-selection queries built on it."""

import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
import pandas as pd

from id3_tlbx.analysis.entropy import (
    PROBABILITY_SUM_TOLERANCE,
    calculate_average_information_entropy,
    calculate_entropy,
)
from id3_tlbx.utils.paths import get_dataset_path

from .play_tennis_columns import PlayTennisColumn


if TYPE_CHECKING:
    from id3_tlbx.analysis.information_gain import InformationGainAnalyzer
    from id3_tlbx.analysis.tree_builder import ID3TreeBuilder


logger = logging.getLogger(__name__)

GAIN_TIE_TOLERANCE: float = 1e-12
"""Information gains closer than this to the maximum count as ties."""

CLASS_COLUMN_DEFAULT = "class"


def _default_column_names(width: int) -> list[str]:
    if width == 0:
        return []
    return [CLASS_COLUMN_DEFAULT, *(f"attribute_{i}" for i in range(width - 1))]


class Entries:
    """Categorical dataset used for ID3 split selection.

    Each row is a sequence of strings. Field 0 is the class label, fields ``1..N-1`` are attribute values.
    Attributes are addressed by a zero-based ``attribute_id`` over the attribute columns only, i.e.
    ``attribute_id`` 0 is field 1 of a row.

    The table is copied on construction and never modified afterwards; every query is a pure function of it.

    **Example workflow**:
    >>> from id3_tlbx.data import Entries
    >>> entries = Entries.from_csv()  # bundled PlayTennis dataset
    >>> best = entries.get_attribute_with_highest_information_gain()
    >>> entries.attribute_name(best)
    'outlook'
    >>> tree = entries.make_tree_builder().fit().result()
    >>> print(tree.render())
    """

    def __init__(
        self,
        rows: Iterable[Sequence[str]] = (),
        *,
        columns: Sequence[str] | None = None,
    ) -> None:
        """Initialize the table.

        Args:
            rows: Rows of equal length; field 0 is the class label.
            columns: Optional names of the class column followed by the attribute columns.
                Defaults to ``"class", "attribute_0", ...``.
        """
        rows = [tuple(row) for row in rows]
        if columns is None:
            columns = _default_column_names(len(rows[0]) if rows else 0)
        self._df = pd.DataFrame(rows, columns=list(columns), dtype=object)

    @classmethod
    def from_frame(cls, df: pd.DataFrame, *, class_column: str | None = None) -> "Entries":
        """Build entries from a DataFrame of categorical values.

        Args:
            df: DataFrame whose columns are the class column and the attribute columns.
            class_column: Name of the class column. It is moved to the front; when omitted the first
                column is taken as the class column.

        Returns:
            Entries instance holding a copy of ``df`` as strings.
        """
        if class_column is not None:
            if class_column not in df.columns:
                raise ValueError(f"Class column '{class_column}' not found in {list(df.columns)}")
            df = df.loc[:, [class_column, *(col for col in df.columns if col != class_column)]]

        df = df.astype(str)
        return cls(df.itertuples(index=False, name=None), columns=[str(col) for col in df.columns])

    @classmethod
    def from_csv(
        cls,
        csv_path: str | Path | None = None,
        *,
        class_column: str | None = None,
    ) -> "Entries":
        """Load entries from a CSV file with a header row.

        All values are read as strings with surrounding whitespace removed. Empty fields stay empty strings.

        Args:
            csv_path: Path to the CSV file (defaults to the bundled PlayTennis dataset)
            class_column: Name of the class column (defaults to the first column)

        Returns:
            Entries instance with the loaded data
        """
        csv_path = get_dataset_path("play_tennis") if csv_path is None else Path(csv_path)

        df = pd.read_csv(csv_path, dtype=str, keep_default_na=False).pipe(cls._strip_values)
        entries = cls.from_frame(df, class_column=class_column)
        logger.debug(
            "Loaded %d entries with %d attributes from %s",
            len(entries),
            entries.num_attributes,
            csv_path,
        )
        return entries

    @staticmethod
    def _strip_values(df: pd.DataFrame) -> pd.DataFrame:
        """Strip whitespace from column names and cell values."""
        df = df.set_axis(df.columns.str.strip(), axis=1)
        return df if df.empty else df.map(str.strip)

    # ------------------------------------------------------------------ table access
    @property
    def df(self) -> pd.DataFrame:
        """Get a copy of the underlying table."""
        return self._df.copy()

    @property
    def rows(self) -> tuple[tuple[str, ...], ...]:
        """Get the rows as tuples of strings."""
        return tuple(self._df.itertuples(index=False, name=None))

    @property
    def class_column(self) -> str | None:
        """Name of the class column, ``None`` for a table without columns."""
        return str(self._df.columns[0]) if self._df.shape[1] else None

    @property
    def attribute_names(self) -> list[str]:
        """Names of the attribute columns in AttributeId order."""
        return [str(col) for col in self._df.columns[1:]]

    @property
    def num_attributes(self) -> int:
        return max(self._df.shape[1] - 1, 0)

    def attribute_name(self, attribute_id: int) -> str:
        """Get the column name of an attribute."""
        return str(self._attribute_column(attribute_id).name)

    def get_pretty_name(self, column_name: str) -> str:
        """Convert column name to pretty name for visualization."""
        try:
            col_enum = PlayTennisColumn(column_name)
        except ValueError:
            return column_name.replace("_", " ").title()
        else:
            return col_enum.pretty_name

    def __len__(self) -> int:
        return len(self._df)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(n_entries={len(self)}, attributes={self.attribute_names})"

    def _classes(self) -> pd.Series:
        if self._df.shape[1] == 0:
            return pd.Series(dtype=object)
        return self._df.iloc[:, 0]

    def _attribute_column(self, attribute_id: int) -> pd.Series:
        if not 0 <= attribute_id < self.num_attributes:
            raise IndexError(
                f"Attribute id {attribute_id} out of range, dataset has {self.num_attributes} attribute(s).",
            )
        return self._df.iloc[:, attribute_id + 1]

    # ------------------------------------------------------------------ class queries
    def get_classes(self) -> frozenset[str]:
        """Get all distinct class labels (field 0 of every row)."""
        return frozenset(self._classes().unique())

    def are_all_entries_with_same_class(self) -> bool:
        """Check whether the dataset is pure, i.e. has exactly one class label."""
        return len(self.get_classes()) == 1

    def is_empty(self) -> bool:
        return self._df.empty

    def class_counts(self) -> pd.Series:
        """Count entries per class label.

        Returns:
            Series indexed by class label, sorted by count (descending) and label (ascending) for equal counts.
        """
        return (
            self._classes()
            .value_counts()
            .sort_index(kind="stable")
            .sort_values(ascending=False, kind="stable")
            .rename("count")
        )

    def majority_class(self) -> str:
        """Get the most frequent class label; ties resolve to the lexicographically smallest label."""
        if self.is_empty():
            raise ValueError("Majority class of an empty dataset is undefined.")
        return str(self.class_counts().index[0])

    # ------------------------------------------------------------------ attribute queries
    def count_entries_by_attribute(self, attribute_id: int, value: str) -> int:
        """Count the entries with a specific attribute value.

        Values that never occur in the column yield 0.
        """
        return int(self._attribute_column(attribute_id).eq(value).sum())

    def get_all_possible_attribute_values(self, attribute_id: int) -> frozenset[str]:
        """Get the distinct values observed for an attribute."""
        return frozenset(self._attribute_column(attribute_id).unique())

    def partition(self, attribute_id: int, value: str) -> "Entries":
        """Select the entries whose attribute equals ``value``.

        The child keeps the full column layout, so attribute ids stay valid.
        """
        subset = self._df.loc[self._attribute_column(attribute_id).eq(value)]
        return Entries(subset.itertuples(index=False, name=None), columns=list(self._df.columns))

    # ------------------------------------------------------------------ entropy queries
    def calculate_entropy_of_classes(self, *, tolerance: float = PROBABILITY_SUM_TOLERANCE) -> float:
        """Calculate the entropy E(S) of the class distribution of the whole dataset."""
        if self.is_empty():
            raise ValueError("Entropy of an empty dataset is undefined.")
        return calculate_entropy(self._classes().value_counts(normalize=True).to_numpy(), tolerance=tolerance)

    def calculate_attribute_entropy(
        self,
        attribute_id: int,
        value: str,
        *,
        tolerance: float = PROBABILITY_SUM_TOLERANCE,
    ) -> float:
        """Calculate E(A=x), e.g. E(Outlook=sunny).

        The class distribution is restricted to the entries with ``attribute_id == value``.
        An empty subset has entropy 0.
        """
        subset = self._classes().loc[self._attribute_column(attribute_id).eq(value)]
        if subset.empty:
            return 0.0
        return calculate_entropy(subset.value_counts(normalize=True).to_numpy(), tolerance=tolerance)

    def calculate_attribute_average_information_entropy(self, attribute_id: int) -> float:
        """Calculate the average information entropy I(A) of an attribute."""
        pairs = [
            (
                self.count_entries_by_attribute(attribute_id, value),
                self.calculate_attribute_entropy(attribute_id, value),
            )
            for value in sorted(self.get_all_possible_attribute_values(attribute_id))
        ]
        return calculate_average_information_entropy(len(self), pairs)

    def calculate_information_gain(self, attribute_id: int) -> float:
        """Calculate Gain(A) = E(S) - I(A)."""
        return self.calculate_entropy_of_classes() - self.calculate_attribute_average_information_entropy(
            attribute_id,
        )

    def information_gains(self) -> pd.Series:
        """Calculate the information gain of every attribute.

        Returns:
            Series of gains indexed by attribute id.
        """
        dataset_entropy = self.calculate_entropy_of_classes()
        gains = [
            dataset_entropy - self.calculate_attribute_average_information_entropy(attribute_id)
            for attribute_id in range(self.num_attributes)
        ]
        return pd.Series(
            np.asarray(gains, dtype=float),
            index=pd.RangeIndex(self.num_attributes, name="attribute_id"),
            name="information_gain",
        )

    def splittable_attributes(self) -> list[int]:
        """Attribute ids with at least two observed values, in ascending order."""
        return [
            attribute_id
            for attribute_id in range(self.num_attributes)
            if self._attribute_column(attribute_id).nunique() >= 2
        ]

    def get_attribute_with_highest_information_gain(
        self,
        *,
        candidates: Iterable[int] | None = None,
        tie_tolerance: float = GAIN_TIE_TOLERANCE,
    ) -> int:
        """Select the attribute whose split yields the highest information gain.

        Among attributes whose gain lies within ``tie_tolerance`` of the maximum, the lowest attribute id
        is returned, so the induced tree structure is reproducible.

        Args:
            candidates: Attribute ids to choose from (defaults to all attributes).
            tie_tolerance: Gains closer than this to the maximum count as ties.

        Raises:
            ValueError: If the dataset is empty, has no attribute columns or ``candidates`` is empty.
            IndexError: If a candidate id is out of range.
        """
        if self.is_empty():
            raise ValueError("Cannot select a split attribute for an empty dataset.")
        if self.num_attributes == 0:
            raise ValueError("Dataset has no attribute columns to split on.")

        gains = self.information_gains()
        if candidates is not None:
            candidate_ids = sorted(set(candidates))
            if not candidate_ids:
                raise ValueError("No candidate attributes to split on.")
            for attribute_id in candidate_ids:
                self._attribute_column(attribute_id)
            gains = gains.loc[candidate_ids]
        best_gain = gains.max()
        return int(gains.index[(gains >= best_gain - tie_tolerance).to_numpy()][0])

    # ------------------------------------------------------------------ analyzers
    def make_information_gain_analyzer(self) -> "InformationGainAnalyzer":
        """Instantiate an information gain analyzer for this dataset."""
        from id3_tlbx.analysis.information_gain import InformationGainAnalyzer

        return InformationGainAnalyzer(self)

    def make_tree_builder(self) -> "ID3TreeBuilder":
        """Instantiate an ID3 tree builder for this dataset.

        Example:
            >>> tree = Entries.from_csv().make_tree_builder().fit().result()
            >>> tree.predict(["Sunny", "Cool", "High", "Strong"])
            'No'
        """
        from id3_tlbx.analysis.tree_builder import ID3TreeBuilder

        return ID3TreeBuilder(self)
