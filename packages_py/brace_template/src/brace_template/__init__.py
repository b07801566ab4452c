from .types import (
    Literal,
    Placeholder,
    Segment,
    Segments,
    segments_to_source,
    KeyToken,
    PathExpression,
    BindingKind,
    Diagnostic,
    FormatResult,
)
from .errors import (
    TemplateError,
    InvalidTemplateError,
    MissingBindingError,
    InvalidBindingError,
    ResolutionError,
    TypeMismatchError,
    IndexOutOfRangeError,
    PrivateAccessorError,
    NonScalarResultWarning,
)
from .compiler import compile_template, find_placeholder_spans
from .extractor import extract_placeholders
from .path_parser import parse_expression, parse_path
from .binding import classify, is_bindable
from .resolver import resolve_path
from .coercion import coerce_to_string, is_scalar
from .formatter import render, format_segments
from .config import FormatterConfig, load_config, get_config, set_config
from .template import Template, template

__all__ = [
    "Literal",
    "Placeholder",
    "Segment",
    "Segments",
    "segments_to_source",
    "KeyToken",
    "PathExpression",
    "BindingKind",
    "Diagnostic",
    "FormatResult",
    "TemplateError",
    "InvalidTemplateError",
    "MissingBindingError",
    "InvalidBindingError",
    "ResolutionError",
    "TypeMismatchError",
    "IndexOutOfRangeError",
    "PrivateAccessorError",
    "NonScalarResultWarning",
    "compile_template",
    "find_placeholder_spans",
    "extract_placeholders",
    "parse_expression",
    "parse_path",
    "classify",
    "is_bindable",
    "resolve_path",
    "coerce_to_string",
    "is_scalar",
    "render",
    "format_segments",
    "FormatterConfig",
    "load_config",
    "get_config",
    "set_config",
    "Template",
    "template",
]
