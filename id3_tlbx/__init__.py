"""ID3 toolbox: entropy, information gain and decision tree induction over categorical data."""

from .data import Entries
from .errors import ErrorKind, ID3Error


__version__ = "0.1.0"

__all__ = ["Entries", "ErrorKind", "ID3Error", "__version__"]
