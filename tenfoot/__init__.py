"""tenfoot: spatial grid navigation and fuzzy search for 10-foot UIs."""

from .fuzzy import FuzzyMatch, score, search
from .grid import GridOptions, NavigationGrid, NavResult, compute_next_index
from .keys import Direction, InputSource, KeyEvent
from .search import SearchOverlay

__version__ = "0.1.0"

__all__ = [
    "Direction",
    "FuzzyMatch",
    "GridOptions",
    "InputSource",
    "KeyEvent",
    "NavResult",
    "NavigationGrid",
    "SearchOverlay",
    "compute_next_index",
    "score",
    "search",
]
