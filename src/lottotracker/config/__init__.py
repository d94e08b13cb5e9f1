"""Page-structure selector config loading and schema."""

from .loader import ConfigLoadError, load_selectors
from .schema import PageSelectors

__all__ = ["ConfigLoadError", "PageSelectors", "load_selectors"]
