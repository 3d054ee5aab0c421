"""
Heuristic maintainability metrics for JavaScript / TypeScript sources.

These are plain text scanners, not parsers: they work line by line (or with
regular expressions over the whole file) and have no notion of strings,
template literals or nested comments.
"""
import re
from typing import List

# Lines starting with any of these (after stripping) are not counted as code
_NON_CODE_PREFIXES = ("//", "/*", "*", "import ", "export ")

# Identifiers are matched with ASCII word characters only
# Named declarations, arrow assignments, `name: function` and brace-opening call-like lines
_FUNCTION_RE = re.compile(
    r"(?:function\s+\w+|\w+\s*=\s*\(.*\)\s*=>|\w+\s*:\s*function|^\s*\w+\(.*\)\s*\{)",
    re.MULTILINE | re.ASCII,
)
_ARROW_FUNCTION_RE = re.compile(r"(?:const|let|var)\s+\w+\s*=\s*\(.*\)\s*=>", re.MULTILINE | re.ASCII)
_REGULAR_FUNCTION_RE = re.compile(r"function\s+\w+\s*\(.*\)\s*\{", re.MULTILINE | re.ASCII)

_TODO_RE = re.compile(r"(//|#|\*)\s*(TODO|FIXME):?\s*(.*)", re.IGNORECASE)


def count_loc(text: str) -> int:
    """
    Count non-empty lines of code.

    Comment lines and import/export statements are excluded.
    """
    count = 0
    for line in text.split("\n"):
        trimmed = line.strip()
        if trimmed and not trimmed.startswith(_NON_CODE_PREFIXES):
            count += 1
    return count


def count_methods(text: str) -> int:
    """
    Count functions and methods.

    The three pattern families are counted independently and summed, so a
    construct such as ``const f = () => {}`` contributes more than once.
    """
    function_matches = len(_FUNCTION_RE.findall(text))
    arrow_matches = len(_ARROW_FUNCTION_RE.findall(text))
    regular_matches = len(_REGULAR_FUNCTION_RE.findall(text))

    return function_matches + arrow_matches + regular_matches


def find_todos(text: str) -> List[str]:
    """Return every TODO / FIXME comment fragment (``//``, ``#`` or ``*`` style), in order."""
    return [match.group(0).strip() for match in _TODO_RE.finditer(text)]
