"""Base analyzer class for all analysis components of the toolbox."""

from abc import ABC, abstractmethod
from typing import Any


class BaseAnalyser(ABC):
    """Abstract base class for analysis components working on :class:`~id3_tlbx.data.entries.Entries`.

    All analyzers must:
    1. Accept an ``Entries`` table in their constructor
    2. Implement fit() to perform the analysis and return self for chaining
    3. Implement result() to return a frozen dataclass with results

    ---

    ### Adding a New Analyzer

    **1. Create analyzer class** (in `analysis/my_analyzer.py`):

    ```python
    from dataclasses import dataclass

    @dataclass(frozen=True)
    class MyAnalysisResult:
        '''Results package for MyAnalyzer.'''
        summary: pd.DataFrame

    class MyAnalyzer(BaseAnalyser):
        '''Pure computation analyzer (no plotting!).'''

        def __init__(self, entries: Entries):
            self._entries = entries
            self._summary: pd.DataFrame | None = None

        def fit(self) -> "MyAnalyzer":
            self._summary = ...
            return self

        def result(self) -> MyAnalysisResult:
            if self._summary is None:
                raise ValueError("Must call fit() before result()")
            return MyAnalysisResult(summary=self._summary)
    ```

    **2. Add factory method** to `Entries`:

    ```python
    def make_my_analyzer(self) -> "MyAnalyzer":
        from id3_tlbx.analysis.my_analyzer import MyAnalyzer
        return MyAnalyzer(self)
    ```

    Plotting functions live in `plotting/` and accept the `*Result` dataclasses, never the analyzer.
    """

    @abstractmethod
    def fit(self) -> "BaseAnalyser":
        """Fit the analyzer to the data.

        Returns:
            Self for method chaining.
        """
        ...

    @abstractmethod
    def result(self) -> Any:
        """Return analysis results as a frozen dataclass instance.

        Raises:
            ValueError: If fit() has not been called yet.
        """
        ...
