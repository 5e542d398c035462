"""Locations of the datasets bundled with the package."""

from importlib.resources import files
from pathlib import Path


__all__ = ["BUNDLED_DATASETS", "get_data_dir", "get_dataset_path", "list_datasets"]


BUNDLED_DATASETS: dict[str, str] = {
    "play_tennis": "play_tennis.csv",
}
"""Dataset key -> CSV file name inside ``id3_tlbx/_data``."""


def get_data_dir() -> Path:
    """Get the directory holding the bundled CSV files."""
    return Path(str(files("id3_tlbx") / "_data"))


def list_datasets() -> list[str]:
    return sorted(BUNDLED_DATASETS)


def get_dataset_path(name: str) -> Path:
    """Resolve a bundled dataset.

    Args:
        name: Dataset key (see :data:`BUNDLED_DATASETS`) or a file name inside the data directory

    Returns:
        Path to the CSV file

    Raises:
        FileNotFoundError: If no such file is bundled
    """
    path = get_data_dir() / BUNDLED_DATASETS.get(name, name)
    if not path.is_file():
        raise FileNotFoundError(f"Dataset '{name}' not found at {path}. Bundled datasets: {list_datasets()}")
    return path
