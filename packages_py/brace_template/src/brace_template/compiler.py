"""
Template compiler.

Turns template text into a tree of Literal and Placeholder segments. A
placeholder is a balanced group: an unescaped `{`, any mix of plain text and
nested balanced groups, then an unescaped `}`. A brace directly preceded by a
backslash is plain text and never a delimiter; the backslash is kept.
"""
import logging
from typing import Dict, List, Optional, Tuple

from .types import Literal, Placeholder, Segment, Segments

logger = logging.getLogger(__name__)

OPEN = "{"
CLOSE = "}"
ESCAPE = "\\"


def is_escaped(text: str, pos: int) -> bool:
    """Check whether the character at pos is preceded by a backslash."""
    return pos > 0 and text[pos - 1] == ESCAPE


def match_groups(text: str) -> Dict[int, int]:
    """
    Map the offset of every `{` that opens a balanced group to the end
    offset (exclusive) of that group.

    Single forward pass over a stack of open positions. An escaped brace
    can't sit inside a group, so it drops every group still open; those
    braces, and any still open at the end, stay literal text.
    """
    groups: Dict[int, int] = {}
    open_positions: List[int] = []

    for i, char in enumerate(text):
        if char != OPEN and char != CLOSE:
            continue
        if is_escaped(text, i):
            open_positions.clear()
        elif char == OPEN:
            open_positions.append(i)
        elif open_positions:
            groups[open_positions.pop()] = i + 1

    return groups


def find_placeholder_spans(text: str) -> List[Tuple[int, int]]:
    """Find the (start, end) spans of every top-level placeholder, left to right."""
    groups = match_groups(text)
    spans = []
    i = 0
    n = len(text)
    while i < n:
        end = groups.get(i)
        if end is not None:
            spans.append((i, end))
            i = end
            continue
        i += 1
    return spans


def compile_template(template: str) -> Segments:
    """
    Compile template text into its segment tree.

    Never fails: unbalanced or escaped braces stay in the output as literal
    text. Compiling the same text twice gives equal trees.
    """
    groups = match_groups(template)

    # (children, offset of the closing brace); the root has no closing brace
    stack: List[Tuple[List[Segment], Optional[int]]] = [([], None)]
    literal_start = 0
    i = 0
    n = len(template)

    while i < n:
        children, close = stack[-1]

        if i == close:
            if i > literal_start:
                children.append(Literal(template[literal_start:i]))
            stack.pop()
            stack[-1][0].append(Placeholder(tuple(children)))
            i += 1
            literal_start = i
            continue

        end = groups.get(i)
        if end is not None:
            if i > literal_start:
                children.append(Literal(template[literal_start:i]))
            stack.append(([], end - 1))
            i += 1
            literal_start = i
            continue

        i += 1

    root = stack[0][0]
    if literal_start < n:
        root.append(Literal(template[literal_start:]))

    segments = tuple(root)
    logger.debug(f"Compiled template into {len(segments)} top-level segments")
    return segments
