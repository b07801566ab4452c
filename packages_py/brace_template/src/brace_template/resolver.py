import logging
from typing import Any, Optional

from .binding import MISSING, NEEDS_ARGUMENTS, classify, lookup_accessor
from .config import FormatterConfig, get_config
from .errors import IndexOutOfRangeError, PrivateAccessorError, TypeMismatchError
from .path_parser import parse_expression
from .types import BindingKind, KeyToken

logger = logging.getLogger(__name__)


def _step_index(node: Any, key: KeyToken, expression: str) -> Any:
    kind = classify(node)
    if kind is not BindingKind.SEQUENCE:
        raise TypeMismatchError(key.raw, expression, expected="sequence", actual=kind.value)
    if key.index >= len(node):
        raise IndexOutOfRangeError(key.raw, expression, key.index, len(node))
    return node[key.index]


def _step_name(node: Any, key: KeyToken, expression: str, config: FormatterConfig) -> Any:
    kind = classify(node)

    if kind is BindingKind.MAPPING:
        # Absent keys resolve to None rather than failing
        return node.get(key.raw)

    if kind is BindingKind.RECORD:
        if key.raw.startswith("_") and not config.allow_private_accessors:
            raise PrivateAccessorError(key.raw, expression, actual=type(node).__name__)
        value = lookup_accessor(node, key.raw)
        if value is MISSING:
            raise TypeMismatchError(
                key.raw, expression,
                expected=f"object with accessor '{key.raw}'",
                actual=type(node).__name__,
            )
        if value is NEEDS_ARGUMENTS:
            raise TypeMismatchError(
                key.raw, expression,
                expected="zero-argument accessor",
                actual=f"method {type(node).__name__}.{key.raw} that takes arguments",
            )
        return value

    raise TypeMismatchError(key.raw, expression, expected="mapping or object", actual=kind.value)


def resolve_path(binding: Any, expression: str, config: Optional[FormatterConfig] = None) -> Any:
    """
    Resolve a key expression like "a.0.b" against a binding.

    Digit-only keys index sequences. Other keys look up mapping entries or
    call object accessors. Any format spec after ':' is ignored. The binding
    is never modified.
    """
    config = config or get_config()
    parsed = parse_expression(expression)
    node = binding

    for key in parsed.keys:
        if key.is_index:
            node = _step_index(node, key, parsed.expression)
        else:
            node = _step_name(node, key, parsed.expression, config)

    logger.debug(f"Resolved '{expression}' to {classify(node).value} value")
    return node
