"""Filter expression parsing and matching.

A filter string is either a literal, compared by exact equality, or a
pattern written as ``/body/flags``. Patterns use partial (search) matching;
anchor with ``^`` and ``$`` for a full match.

Flags are ``i``, ``m`` and ``g``, each at most once. The body is a Python
regular expression, so JavaScript-only syntax such as the named group
``(?<name>...)`` must be written ``(?P<name>...)``.
"""

import re
from dataclasses import dataclass

from zabbix_query.core.errors import InvalidFilterSyntax

_PATTERN_SHAPE = re.compile(r"/(.*)/([gmi]*)")

# "g" has no meaning for a single test and is accepted for compatibility
_FLAG_MAP = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "g": 0,
}


def is_pattern(text: str) -> bool:
    """Return True if text is written in /pattern/flags form."""
    return _PATTERN_SHAPE.fullmatch(text) is not None


def compile_pattern(text: str) -> re.Pattern[str]:
    """Compile a /pattern/flags filter.

    Args:
        text: Filter string in /pattern/flags form.

    Returns:
        Compiled regular expression.

    Raises:
        InvalidFilterSyntax: If text is not in pattern form or the body
            does not compile, or a flag is repeated.
    """
    shape = _PATTERN_SHAPE.fullmatch(text)
    if shape is None:
        raise InvalidFilterSyntax(text, "not a /pattern/ expression")
    body, flag_chars = shape.groups()
    # @tra: Filters.Pattern.DuplicateFlags
    if len(set(flag_chars)) != len(flag_chars):
        raise InvalidFilterSyntax(text, f"duplicate flags {flag_chars!r}")
    flags = 0
    for char in flag_chars:
        flags |= _FLAG_MAP[char]
    try:
        return re.compile(body, flags)
    except re.error as e:
        raise InvalidFilterSyntax(text, str(e)) from e


@dataclass(frozen=True)
class LiteralFilter:
    """Filter matching names by exact equality."""

    value: str

    @property
    def is_empty(self) -> bool:
        return self.value == ""

    def matches(self, name: str) -> bool:
        # @tra: Filters.Literal.ExactMatch
        return name == self.value


@dataclass(frozen=True)
class PatternFilter:
    """Filter matching names against a compiled pattern.

    Attributes:
        source: The filter string the pattern was compiled from.
        regex: Compiled pattern.
    """

    source: str
    regex: re.Pattern[str]

    def matches(self, name: str) -> bool:
        return self.regex.search(name) is not None


FilterExpr = LiteralFilter | PatternFilter


def parse_filter(text: str | FilterExpr | None) -> FilterExpr:
    """Classify a filter string once, compiling it if it is a pattern.

    Already-parsed filters are returned unchanged and None is treated as
    the empty literal.

    Raises:
        InvalidFilterSyntax: If a pattern body does not compile or repeats a flag.
    """
    if isinstance(text, (LiteralFilter, PatternFilter)):
        return text
    if text is None:
        return LiteralFilter("")
    if is_pattern(text):
        return PatternFilter(source=text, regex=compile_pattern(text))
    return LiteralFilter(text)
