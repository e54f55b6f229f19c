"""Load FARS accident files, count accidents by month and year, and map them by state."""

from farsdata.analytics.summary import fars_summarize_years
from farsdata.errors import FarsDataError, InvalidStateError, InvalidYearWarning
from farsdata.ingestion.years import fars_read_years, load_years
from farsdata.plotting.state_map import fars_map_state
from farsdata.storage.datasets import fars_read, make_filename

__version__ = "0.1.0"

__all__ = [
    "FarsDataError",
    "InvalidStateError",
    "InvalidYearWarning",
    "fars_map_state",
    "fars_read",
    "fars_read_years",
    "fars_summarize_years",
    "load_years",
    "make_filename",
]
