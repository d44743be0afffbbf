class PivotSortError(Exception):
    """Base class for errors raised by the pivotsort tooling."""


class SettingsError(PivotSortError):
    """Settings file could not be read or is not a JSON object."""


class BenchmarkError(PivotSortError):
    """A sorter under benchmark returned out-of-order output."""
