"""Test configuration for the ID3 toolbox."""

from pathlib import Path
import sys

import matplotlib
import pytest


matplotlib.use("Agg")

# Ensure the local package is importable when the repo isn't installed.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture(scope="session")
def play_tennis():
    """Load the bundled PlayTennis dataset once per test session."""
    from id3_tlbx.data import Entries

    return Entries.from_csv()


@pytest.fixture
def tie_entries():
    """Dataset whose attributes 1 and 2 are identical copies and separate the classes best."""
    from id3_tlbx.data import Entries

    return Entries(
        [
            ["yes", "a", "x", "x"],
            ["yes", "b", "x", "x"],
            ["no", "a", "y", "y"],
            ["no", "b", "y", "y"],
            ["no", "a", "y", "y"],
        ],
    )
