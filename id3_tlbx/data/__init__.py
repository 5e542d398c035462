"""Data module for the categorical dataset class."""

from .entries import GAIN_TIE_TOLERANCE, Entries
from .play_tennis_columns import PlayTennisColumn as PTCol


__all__ = ["GAIN_TIE_TOLERANCE", "Entries", "PTCol"]
