"""
Template wrapper.

Holds a template string, its compiled segments and an optional default
binding, and routes formatting (including str() and the % operator) to the
formatter.
"""
from typing import Any, Optional

from .binding import is_bindable
from .compiler import compile_template
from .config import FormatterConfig, get_config
from .errors import InvalidBindingError, InvalidTemplateError, MissingBindingError
from .formatter import format_segments, render
from .types import FormatResult, Segments


class Template:
    """A compiled brace template.

    The template text is compiled once on construction. The default binding
    can be replaced with bind(); an explicit binding passed to format() wins
    over it for that call only.
    """

    def __init__(
        self,
        template: str,
        binding: Any = None,
        *,
        config: Optional[FormatterConfig] = None
    ):
        if not isinstance(template, str):
            raise InvalidTemplateError(template)

        self._template = template
        self._segments = compile_template(template)
        self._binding: Any = None
        self._config = config

        if binding is not None:
            self.bind(binding)

    @property
    def template(self) -> str:
        return self._template

    @property
    def binding(self) -> Any:
        return self._binding

    @property
    def segments(self) -> Segments:
        return self._segments

    @property
    def config(self) -> FormatterConfig:
        return self._config or get_config()

    def bind(self, binding: Any) -> "Template":
        """Set the default binding; bind(None) removes it."""
        if binding is None:
            self._binding = None
            return self

        if not is_bindable(binding):
            raise InvalidBindingError(binding)

        self._binding = binding
        return self

    def _select_binding(self, binding: Any) -> Any:
        if binding is None:
            binding = self._binding
        if binding is None:
            raise MissingBindingError()
        return binding

    def format(self, binding: Any = None) -> str:
        return format_segments(self._segments, self._select_binding(binding), self.config)

    def render(self, binding: Any = None) -> FormatResult:
        """Like format(), but returns diagnostics instead of emitting warnings."""
        return render(self._segments, self._select_binding(binding), self.config)

    def interpolate(self, binding: Any) -> str:
        return self.format(binding)

    def __mod__(self, binding: Any) -> str:
        return self.interpolate(binding)

    def __rmod__(self, other: Any) -> str:
        raise TypeError(f"{type(self).__name__} object must come first in % interpolation")

    def __str__(self) -> str:
        if self._binding is None:
            return self._template
        return self.format(self._binding)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._template!r})"


def template(text: str) -> Template:
    """Shortcut for Template(text) with no binding."""
    return Template(text)
