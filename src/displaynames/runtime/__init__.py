"""DisplayNames runtime package.

Provides option resolution, query dispatch and the Babel-backed lookup
handles. Depends on core for the language tag grammar.

Python 3.13+.
"""

from .display_names import DisplayNames, DisplayNamesConfig, LocaleSelector, resolve_options
from .locale_data import LocaleDisplayData, clear_display_data_cache, create_lookup

__all__ = [
    "DisplayNames",
    "DisplayNamesConfig",
    "LocaleDisplayData",
    "LocaleSelector",
    "clear_display_data_cache",
    "create_lookup",
    "resolve_options",
]
