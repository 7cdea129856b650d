from importlib.resources import files

from .bounds import BoundKind
from .dates import (
    drop_time,
    fill_time,
    first_day_of_month,
    last_day_of_month,
    monday,
    next_sunday,
    sunday,
)
from .errors import ConversionError, FormatError, IntervalError, UnsupportedTypeError
from .formatting import PHRASINGS, IntervalFormatter, Phrasing, Specifier
from .interval import Interval
from .period import Period
from .resolve import (
    Bounded,
    EndpointResolver,
    default_resolver,
    register_bounds,
    register_converter,
)

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(encoding="utf-8"),
    "api": (_docs_path / "API.md").read_text(encoding="utf-8"),
}

__all__ = [
    "Interval",
    "BoundKind",
    "IntervalFormatter",
    "Specifier",
    "Phrasing",
    "PHRASINGS",
    "Bounded",
    "EndpointResolver",
    "default_resolver",
    "register_bounds",
    "register_converter",
    "IntervalError",
    "FormatError",
    "ConversionError",
    "UnsupportedTypeError",
    "Period",
    "drop_time",
    "fill_time",
    "first_day_of_month",
    "last_day_of_month",
    "sunday",
    "monday",
    "next_sunday",
    "docs",
]
