from .university_search import run as university_search_run
from .university_search import (
    TOOL_DESCRIPTION,
    TOOL_NAME,
    DecodeError,
    RemoteError,
    TransportError,
    University,
    UniversityLookup,
    UniversityLookupError,
    format_results,
)

__all__ = [
    "university_search_run",
    "format_results",
    "University",
    "UniversityLookup",
    "UniversityLookupError",
    "TransportError",
    "RemoteError",
    "DecodeError",
    "TOOL_NAME",
    "TOOL_DESCRIPTION",
]
