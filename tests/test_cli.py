"""Tests for the command line entry point."""

from pathlib import Path

import pytest

from id3_tlbx.cli import build_parser, main


class TestCLI:
    """Test id3-tlbx end to end."""

    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])
        assert args.csv_path is None
        assert args.class_column is None
        assert not args.gains
        assert args.log_level == "INFO"

    def test_default_dataset_prints_tree(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main([]) == 0
        out = capsys.readouterr().out
        assert out.splitlines()[0] == "Outlook"
        assert "= Overcast -> Yes (4)" in out

    def test_gains_table(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--gains"]) == 0
        out = capsys.readouterr().out
        assert "E(S) = 0.9403" in out
        assert "Best attribute: outlook (id 0)" in out

    def test_class_column_and_plot(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        csv_path = tmp_path / "data.csv"
        csv_path.write_text("colour,label\nred,yes\nred,yes\nblue,no\n")
        plot_path = tmp_path / "gains.png"

        assert main([str(csv_path), "--class-column", "label", "--plot", str(plot_path)]) == 0
        assert plot_path.exists()
        out = capsys.readouterr().out
        assert "= blue -> no (1)" in out
        assert "= red -> yes (2)" in out

    def test_empty_dataset_fails(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        csv_path = tmp_path / "empty.csv"
        csv_path.write_text("label,colour\n")
        assert main([str(csv_path)]) == 1
        assert "Dataset is empty" in caplog.text

    def test_unknown_class_column_fails(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        csv_path = tmp_path / "data.csv"
        csv_path.write_text("colour,label\nred,yes\n")
        assert main([str(csv_path), "--class-column", "nope"]) == 1
        assert "Cannot load dataset" in caplog.text
        assert "Class column 'nope' not found" in caplog.text

    def test_missing_file_fails(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        assert main([str(tmp_path / "missing.csv")]) == 1
        assert "Cannot load dataset" in caplog.text
