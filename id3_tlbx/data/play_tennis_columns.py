"""Column definitions for the bundled PlayTennis dataset."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True)
class ColumnMetadata:
    """Metadata for a dataset column.

    Attributes:
        cleaned_name: Column name used in DataFrames and CSV headers.
        pretty_name: Human-readable name for use in plots and tree renderings.
        values: Categorical values observed in the textbook dataset.
    """

    cleaned_name: str
    pretty_name: str
    values: tuple[str, ...]


class PlayTennisColumn(StrEnum):
    """Columns of the PlayTennis dataset (Mitchell, *Machine Learning*, table 3.2).

    The class column ``play`` comes first, matching the row layout :class:`~id3_tlbx.data.entries.Entries`
    expects.
    """

    PLAY = "play"
    OUTLOOK = "outlook"
    TEMPERATURE = "temperature"
    HUMIDITY = "humidity"
    WIND = "wind"

    TARGET = PLAY

    def metadata(self) -> ColumnMetadata:
        """Get metadata for this column."""
        return _METADATA[self]

    @property
    def pretty_name(self) -> str:
        """Get the human-readable name for plots and renderings."""
        return self.metadata().pretty_name

    @classmethod
    def attribute_columns(cls) -> list[str]:
        """Get the attribute column names in AttributeId order (class column excluded)."""
        return [str(col) for col in cls if col is not cls.TARGET]


_METADATA: dict[PlayTennisColumn, ColumnMetadata] = {
    PlayTennisColumn.PLAY: ColumnMetadata("play", "Play Tennis", ("Yes", "No")),
    PlayTennisColumn.OUTLOOK: ColumnMetadata("outlook", "Outlook", ("Sunny", "Overcast", "Rain")),
    PlayTennisColumn.TEMPERATURE: ColumnMetadata("temperature", "Temperature", ("Hot", "Mild", "Cool")),
    PlayTennisColumn.HUMIDITY: ColumnMetadata("humidity", "Humidity", ("High", "Normal")),
    PlayTennisColumn.WIND: ColumnMetadata("wind", "Wind", ("Weak", "Strong")),
}
