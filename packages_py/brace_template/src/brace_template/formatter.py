"""
Formatter: walks a compiled segment tree against a binding.

A placeholder's children are formatted first to build its key expression,
which is then resolved against the binding. The text produced for a key
expression is never scanned for further placeholders.
"""
import logging
import warnings
from typing import Any, Iterator, List, Optional, Tuple

from .binding import classify, is_scalar
from .coercion import coerce_to_string
from .config import FormatterConfig, get_config
from .errors import NonScalarResultWarning
from .resolver import resolve_path
from .types import Diagnostic, FormatResult, Literal, Segment, Segments

logger = logging.getLogger(__name__)


def _resolve_placeholder(
    expression: str,
    binding: Any,
    config: FormatterConfig,
    diagnostics: List[Diagnostic]
) -> str:
    value = resolve_path(binding, expression, config)
    if not is_scalar(value):
        kind = classify(value)
        diagnostics.append(Diagnostic(
            expression=expression,
            kind=kind,
            message=str(NonScalarResultWarning(expression, kind.value)),
        ))
    return coerce_to_string(value)


def _format_segments(
    segments: Segments,
    binding: Any,
    config: FormatterConfig,
    diagnostics: List[Diagnostic]
) -> str:
    # One frame per open placeholder: its remaining children and the text built so far
    stack: List[Tuple[Iterator[Segment], List[str]]] = [(iter(segments), [])]
    while True:
        children, parts = stack[-1]
        segment = next(children, None)

        if segment is None:
            text = "".join(parts)
            stack.pop()
            if not stack:
                return text
            stack[-1][1].append(_resolve_placeholder(text, binding, config, diagnostics))
        elif isinstance(segment, Literal):
            parts.append(segment.text)
        else:
            stack.append((iter(segment.children), []))


def render(segments: Segments, binding: Any, config: Optional[FormatterConfig] = None) -> FormatResult:
    """Format segments against binding, returning the text and any diagnostics."""
    config = config or get_config()
    diagnostics: List[Diagnostic] = []
    text = _format_segments(segments, binding, config, diagnostics)
    return FormatResult(text=text, diagnostics=diagnostics)


def format_segments(segments: Segments, binding: Any, config: Optional[FormatterConfig] = None) -> str:
    """
    Format segments against binding and return the text.

    Non-scalar results don't stop formatting; they are logged and emitted as
    NonScalarResultWarning according to config.
    """
    config = config or get_config()
    result = render(segments, binding, config)

    for diagnostic in result.diagnostics:
        if config.log_non_scalar:
            logger.warning(diagnostic.message)
        if config.emit_warnings:
            warnings.warn(
                NonScalarResultWarning(diagnostic.expression, diagnostic.kind.value),
                stacklevel=2,
            )

    return result.text
