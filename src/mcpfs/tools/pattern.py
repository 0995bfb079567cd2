"""Shell-glob matching for file base names.

``fnmatch`` accepts any string as a pattern, treating an unterminated ``[``
as a literal, and has no backslash escapes.  Patterns are normalized here
first so that malformed input is reported instead of silently matching
nothing, and ``\\*`` matches a literal star.
"""

from __future__ import annotations

import fnmatch
import re


class GlobPatternError(ValueError):
    """The pattern is not a well-formed shell glob."""


def _normalize(pattern: str) -> str:
    out: list[str] = []
    i, n = 0, len(pattern)
    while i < n:
        ch = pattern[i]
        if ch == "\\":
            if i + 1 >= n:
                raise GlobPatternError(f"syntax error in pattern {pattern!r}: trailing backslash")
            escaped = pattern[i + 1]
            out.append(f"[{escaped}]" if escaped in "*?[" else escaped)
            i += 2
        elif ch == "[":
            j = i + 1
            negate = j < n and pattern[j] in "!^"
            if negate:
                j += 1
            # A leading ']' is a literal member of the class.
            if j < n and pattern[j] == "]":
                j += 1
            while j < n and pattern[j] != "]":
                j += 1
            if j >= n:
                raise GlobPatternError(f"syntax error in pattern {pattern!r}: unterminated '['")
            body = pattern[i + 1 + int(negate) : j]
            out.append("[" + ("!" if negate else "") + body + "]")
            i = j + 1
        else:
            out.append(ch)
            i += 1
    return "".join(out)


def compile_glob(pattern: str) -> re.Pattern[str]:
    """Validate *pattern* and compile it to a case-sensitive regex.

    Raises:
        GlobPatternError: On an unterminated ``[`` or a trailing backslash.
    """
    return re.compile(fnmatch.translate(_normalize(pattern)))
