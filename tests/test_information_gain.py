"""Tests for InformationGainAnalyzer."""

import pandas as pd
import pytest

from id3_tlbx.analysis.information_gain import InformationGainAnalyzer, InformationGainResult
from id3_tlbx.data import Entries


class TestInformationGainAnalyzer:
    """Test InformationGainAnalyzer functionality."""

    def test_analyzer_creation(self, play_tennis: Entries) -> None:
        analyzer = play_tennis.make_information_gain_analyzer()
        assert isinstance(analyzer, InformationGainAnalyzer)

    def test_result_before_fit_raises(self, play_tennis: Entries) -> None:
        with pytest.raises(ValueError, match=r"Must call fit\(\) before result\(\)"):
            InformationGainAnalyzer(play_tennis).result()

    def test_result(self, play_tennis: Entries) -> None:
        result = InformationGainAnalyzer(play_tennis).fit().result()

        assert isinstance(result, InformationGainResult)
        assert result.dataset_entropy == pytest.approx(0.940, abs=1e-3)
        assert result.best_attribute_id == 0
        assert result.best_attribute == "outlook"
        assert result.pretty_by_col["outlook"] == "Outlook"

    def test_gains_table(self, play_tennis: Entries) -> None:
        gains = InformationGainAnalyzer(play_tennis).fit().result().gains

        assert isinstance(gains, pd.DataFrame)
        assert list(gains.columns) == ["attribute_id", "attribute", "average_entropy", "information_gain"]
        assert list(gains.attribute) == ["outlook", "temperature", "humidity", "wind"]
        assert gains.information_gain.round(3).tolist() == [0.247, 0.029, 0.152, 0.048]
        assert (gains.average_entropy + gains.information_gain).round(6).eq(0.940286).all()

    def test_result_reuses_fitted_selection(self, play_tennis: Entries, monkeypatch: pytest.MonkeyPatch) -> None:
        analyzer = InformationGainAnalyzer(play_tennis).fit()

        def fail(*args: object, **kwargs: object) -> int:
            raise AssertionError("gains recomputed after fit()")

        monkeypatch.setattr(Entries, "get_attribute_with_highest_information_gain", fail)
        monkeypatch.setattr(Entries, "information_gains", fail)
        assert analyzer.result().best_attribute_id == 0
        assert analyzer.result().best_attribute == "outlook"

    def test_result_is_frozen(self, play_tennis: Entries) -> None:
        result = InformationGainAnalyzer(play_tennis).fit().result()
        with pytest.raises(AttributeError):
            result.best_attribute_id = 3  # type: ignore[misc]

    def test_tie_break(self, tie_entries: Entries) -> None:
        result = tie_entries.make_information_gain_analyzer().fit().result()
        assert result.best_attribute_id == 1
        assert result.gains.information_gain[1] == result.gains.information_gain[2]

    def test_empty_dataset_raises(self) -> None:
        with pytest.raises(ValueError, match=r"empty dataset"):
            InformationGainAnalyzer(Entries(columns=["class", "a"])).fit()

    def test_no_attributes_raises(self) -> None:
        with pytest.raises(ValueError, match=r"no attribute columns"):
            InformationGainAnalyzer(Entries([["yes"]])).fit()
