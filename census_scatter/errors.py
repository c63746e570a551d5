class CensusScatterError(Exception):
    """Base class for every error raised by the chart."""


class DatasetLoadError(CensusScatterError):
    """The dataset file is missing, unparseable or has the wrong shape."""


class EmptyDatasetError(CensusScatterError, ValueError):
    """A scale domain was requested over zero rows."""


class UnknownMetricError(CensusScatterError, KeyError):
    """The metric key is not part of the catalog."""


class CatalogError(CensusScatterError, ValueError):
    """The X/Y eligibility declaration is inconsistent."""
