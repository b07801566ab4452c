"""Data models for brace_template."""

import enum
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union


@dataclass(frozen=True)
class Literal:
    """Raw template text, emitted as-is."""
    text: str

    def source(self) -> str:
        return self.text


@dataclass(frozen=True)
class Placeholder:
    """Contents of one matched `{...}` pair; nested pairs are child placeholders."""
    children: Tuple["Segment", ...] = ()

    def source(self) -> str:
        return segments_to_source((self,))


Segment = Union[Literal, Placeholder]

# A compiled template: ordered top-level segments
Segments = Tuple[Segment, ...]


def segments_to_source(segments: Segments) -> str:
    """Rebuild the template text a segment sequence was compiled from."""
    parts: List[str] = []
    stack = [iter(segments)]
    while stack:
        segment = next(stack[-1], None)
        if segment is None:
            stack.pop()
            if stack:
                parts.append("}")
        elif isinstance(segment, Literal):
            parts.append(segment.text)
        else:
            parts.append("{")
            stack.append(iter(segment.children))
    return "".join(parts)


@dataclass(frozen=True)
class KeyToken:
    raw: str
    index: Optional[int] = None

    @property
    def is_index(self) -> bool:
        return self.index is not None


@dataclass(frozen=True)
class PathExpression:
    """A key expression split into its path keys and format spec.

    The format spec is kept for inspection only; it is never applied.
    """
    expression: str
    path: str
    format_spec: Optional[str]
    keys: Tuple[KeyToken, ...]


class BindingKind(enum.Enum):
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    RECORD = "object"
    SCALAR = "scalar"
    ABSENT = "absent"


@dataclass
class Diagnostic:
    """A non-fatal condition found while formatting."""
    expression: str
    kind: BindingKind
    message: str


@dataclass
class FormatResult:
    """Formatted text plus any diagnostics raised while producing it."""
    text: str
    diagnostics: List[Diagnostic] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.diagnostics
