"""Exceptions and warnings raised by brace_template."""
from typing import Any


class TemplateError(Exception):
    """Base exception for template compilation and formatting errors."""
    pass


class InvalidTemplateError(TemplateError, TypeError):
    def __init__(self, value: Any):
        msg = f"Template must be a string, got {type(value).__name__}"
        super().__init__(msg)
        self.value_type = type(value).__name__


class MissingBindingError(TemplateError):
    """Raised when formatting with no explicit binding and no default binding."""

    def __init__(self, msg: str = "Bindings are required if the template has no default binding"):
        super().__init__(msg)


class InvalidBindingError(TemplateError, TypeError):
    def __init__(self, value: Any):
        value_type = type(value).__name__
        msg = f"Binding type ({value_type}) not usable; provide a mapping, sequence or object"
        super().__init__(msg)
        self.value_type = value_type


class ResolutionError(TemplateError):
    """Raised when a placeholder's key expression cannot be resolved."""

    def __init__(self, msg: str, key: str, expression: str):
        super().__init__(msg)
        self.key = key
        self.expression = expression


class TypeMismatchError(ResolutionError):
    def __init__(self, key: str, expression: str, expected: str, actual: str):
        msg = f"Key-type mismatch (key {key}) in {expression}: expected {expected}, got {actual}"
        super().__init__(msg, key, expression)
        self.expected = expected
        self.actual = actual


class IndexOutOfRangeError(TypeMismatchError):
    def __init__(self, key: str, expression: str, index: int, length: int):
        super().__init__(
            key,
            expression,
            expected=f"sequence with index {index}",
            actual=f"sequence of length {length}",
        )
        self.index = index
        self.length = length


class PrivateAccessorError(TypeMismatchError):
    def __init__(self, key: str, expression: str, actual: str):
        super().__init__(key, expression, expected="public accessor", actual=actual)


class NonScalarResultWarning(UserWarning):
    """A key expression resolved to a mapping, sequence or object."""

    def __init__(self, expression: str, kind: str):
        super().__init__(
            f"Format expression {expression} yielded a {kind} value rather than a scalar"
        )
        self.expression = expression
        self.kind = kind
