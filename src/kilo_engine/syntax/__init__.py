"""Syntax highlighting: rule sets and the incremental row highlighter."""

from .highlight import (
    Highlight,
    HighlightClass,
    SyntaxHighlighter,
    highlight_row,
    is_separator,
)
from .rules import RULE_SETS, RuleSet, select_rule_set

__all__ = [
    "Highlight",
    "HighlightClass",
    "SyntaxHighlighter",
    "highlight_row",
    "is_separator",
    "RuleSet",
    "RULE_SETS",
    "select_rule_set",
]
