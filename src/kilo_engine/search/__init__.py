"""Search over rendered text."""

from .engine import SearchDirection, SearchMatch, SearchSession, jump_to

__all__ = ["SearchDirection", "SearchMatch", "SearchSession", "jump_to"]
