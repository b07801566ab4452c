"""
Binding classification.

Every node met while walking a binding is one of a closed set of kinds, and
path resolution dispatches on that kind rather than on ad-hoc attribute
probing.
"""
import inspect
import io
import numbers
import re
from collections.abc import Mapping, Sequence
from typing import Any

from .types import BindingKind

# Returned by lookup_accessor when the record has no usable accessor
MISSING = object()
NEEDS_ARGUMENTS = object()

_TEXT_TYPES = (str, bytes, bytearray)

# Value types that can never serve as a default binding
_UNBINDABLE_TYPES = (re.Pattern, io.IOBase, type)


def classify(value: Any) -> BindingKind:
    if value is None:
        return BindingKind.ABSENT
    if isinstance(value, _TEXT_TYPES) or isinstance(value, (bool, numbers.Number)):
        return BindingKind.SCALAR
    if isinstance(value, Mapping):
        return BindingKind.MAPPING
    if isinstance(value, Sequence):
        return BindingKind.SEQUENCE
    return BindingKind.RECORD


def is_scalar(value: Any) -> bool:
    return classify(value) in (BindingKind.SCALAR, BindingKind.ABSENT)


def is_bindable(value: Any) -> bool:
    """Only mappings, sequences and plain objects may be bound as a default."""
    if classify(value) not in (BindingKind.MAPPING, BindingKind.SEQUENCE, BindingKind.RECORD):
        return False
    if inspect.isroutine(value) or isinstance(value, _UNBINDABLE_TYPES):
        return False
    return True


def takes_no_arguments(func: Any) -> bool:
    """Check that a callable can be invoked without arguments."""
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        # Some builtins expose no signature; let the call decide
        return True

    for param in signature.parameters.values():
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        if param.default is param.empty:
            return False
    return True


def lookup_accessor(record: Any, name: str) -> Any:
    """
    Read the accessor called name on record.

    Methods are called with no arguments; plain attributes and properties are
    returned as they are. Returns MISSING when the record has no such accessor
    and NEEDS_ARGUMENTS when name is a method that requires arguments.
    """
    try:
        attr = getattr(record, name)
    except AttributeError:
        return MISSING

    if inspect.ismethod(attr) or inspect.isfunction(attr) or inspect.isbuiltin(attr):
        if not takes_no_arguments(attr):
            return NEEDS_ARGUMENTS
        return attr()
    return attr
