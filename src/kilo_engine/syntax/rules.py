"""Static grammar table and filename-based rule set selection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

SECONDARY_MARKER = "|"


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Grammar descriptor shared read-only by every row of a document.

    Plain keywords are the language's reserved words. Keywords ending in
    ``SECONDARY_MARKER`` (library types, builtins, well-known macros) belong to
    the secondary class; the marker is not part of the matched text.
    """

    name: str
    filename_patterns: tuple[str, ...]
    keywords: tuple[str, ...] = ()
    line_comment: str = ""
    block_comment_start: str = ""
    block_comment_end: str = ""
    highlight_numbers: bool = False
    highlight_strings: bool = False

    @property
    def block_comments(self) -> bool:
        return bool(self.block_comment_start and self.block_comment_end)

    def keyword_table(self) -> tuple[tuple[str, bool], ...]:
        """Return ``(text, secondary)`` pairs, longest text first."""

        entries = []
        for keyword in self.keywords:
            secondary = keyword.endswith(SECONDARY_MARKER)
            text = keyword[: -len(SECONDARY_MARKER)] if secondary else keyword
            if text:
                entries.append((text, secondary))
        entries.sort(key=lambda entry: -len(entry[0]))
        return tuple(entries)

    def matches(self, filename: str) -> bool:
        for pattern in self.filename_patterns:
            if pattern.startswith("."):
                if filename.endswith(pattern):
                    return True
            elif pattern in filename:
                return True
        return False


C_RULES = RuleSet(
    name="c",
    filename_patterns=(".c", ".h", ".cpp", ".hpp", ".cc"),
    keywords=(
        "auto", "break", "case", "char", "const", "continue", "default", "do",
        "double", "else", "enum", "extern", "float", "for", "goto", "if",
        "inline", "int", "long", "register", "return", "short", "signed",
        "sizeof", "static", "struct", "switch", "typedef", "union", "unsigned",
        "void", "volatile", "while", "class", "namespace", "template",
        "NULL|", "bool|", "true|", "false|", "size_t|", "ssize_t|", "int8_t|",
        "int16_t|", "int32_t|", "int64_t|", "uint8_t|", "uint16_t|",
        "uint32_t|", "uint64_t|", "FILE|",
    ),
    line_comment="//",
    block_comment_start="/*",
    block_comment_end="*/",
    highlight_numbers=True,
    highlight_strings=True,
)

PYTHON_RULES = RuleSet(
    name="python",
    filename_patterns=(".py", ".pyi"),
    keywords=(
        "and", "as", "assert", "async", "await", "break", "class", "continue",
        "def", "del", "elif", "else", "except", "finally", "for", "from",
        "global", "if", "import", "in", "is", "lambda", "nonlocal", "not", "or",
        "pass", "raise", "return", "try", "while", "with", "yield",
        "None", "True", "False",
        "self|", "cls|", "int|", "str|", "float|", "bytes|", "bool|", "list|",
        "dict|", "set|", "tuple|", "len|", "print|", "range|", "isinstance|",
    ),
    line_comment="#",
    highlight_numbers=True,
    highlight_strings=True,
)

SHELL_RULES = RuleSet(
    name="shell",
    filename_patterns=(".sh", ".bash", "bashrc", "profile"),
    keywords=(
        "if", "then", "else", "elif", "fi", "for", "while", "until", "do",
        "done", "case", "esac", "in", "function", "return", "exit",
        "local|", "export|", "readonly|", "declare|",
    ),
    line_comment="#",
    highlight_numbers=True,
    highlight_strings=True,
)

RULE_SETS: tuple[RuleSet, ...] = (C_RULES, PYTHON_RULES, SHELL_RULES)


def select_rule_set(
    filename: Optional[str], rule_sets: Sequence[RuleSet] = RULE_SETS
) -> Optional[RuleSet]:
    """Return the first rule set whose patterns match ``filename``."""

    if not filename:
        return None
    for rules in rule_sets:
        if rules.matches(filename):
            return rules
    return None


__all__ = [
    "RuleSet",
    "RULE_SETS",
    "C_RULES",
    "PYTHON_RULES",
    "SHELL_RULES",
    "SECONDARY_MARKER",
    "select_rule_set",
]
