"""Bundled dataset path resolution tests."""

import pytest

from id3_tlbx.utils.paths import get_data_dir, get_dataset_path, list_datasets


def test_get_dataset_path_play_tennis() -> None:
    path = get_dataset_path("play_tennis")

    assert path.is_file()
    assert path.parent == get_data_dir()
    assert path.name == "play_tennis.csv"


def test_file_name_is_accepted() -> None:
    assert get_dataset_path("play_tennis.csv") == get_dataset_path("play_tennis")


def test_unknown_dataset_raises() -> None:
    with pytest.raises(FileNotFoundError, match=r"Bundled datasets: \['play_tennis'\]"):
        get_dataset_path("iris")


def test_list_datasets() -> None:
    assert list_datasets() == ["play_tennis"]
