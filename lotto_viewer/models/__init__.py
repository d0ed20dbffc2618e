"""In-memory records for the analysis payload."""

from lotto_viewer.models.analysis import AnalysisResponse, Combination, HotNumber, Stats  # noqa: F401
