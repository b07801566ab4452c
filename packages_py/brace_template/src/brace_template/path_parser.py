import re
from typing import List

from .types import KeyToken, PathExpression

PATH_SEPARATOR = "."
SPEC_SEPARATOR = ":"

INDEX_PATTERN = re.compile(r"[0-9]+")


def parse_key(raw: str) -> KeyToken:
    """Digit-only keys index sequences; anything else is a name."""
    if INDEX_PATTERN.fullmatch(raw):
        return KeyToken(raw=raw, index=int(raw))
    return KeyToken(raw=raw)


def parse_path(path: str) -> List[KeyToken]:
    """
    Parse a dotted path into key tokens.
    Trailing empty segments are dropped, so an empty path has no keys.
    """
    if not path:
        return []

    segments = path.split(PATH_SEPARATOR)
    while segments and segments[-1] == "":
        segments.pop()

    return [parse_key(segment) for segment in segments]


def parse_expression(expression: str) -> PathExpression:
    """Split a key expression into its path and (unused) format spec."""
    if SPEC_SEPARATOR in expression:
        path, format_spec = expression.split(SPEC_SEPARATOR, 1)
    else:
        path, format_spec = expression, None

    return PathExpression(
        expression=expression,
        path=path,
        format_spec=format_spec,
        keys=tuple(parse_path(path)),
    )
