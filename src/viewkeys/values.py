"""Value shapes accepted by ViewStore.set().

A stored value is either a scalar (usually a template name, or False for
"inactive") or a record. Records must carry a template together with its
data context, or a content payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable, Literal, TypedDict, Union


class TemplateValue(TypedDict, total=False):
    """A named template plus the data context to render it with."""

    template: str
    data: Mapping[str, Any]
    large: bool  # popupContainer only


class ContentValue(TypedDict, total=False):
    """Free-form payload for info popups and info boxes."""

    content: Union[str, Mapping[str, Any]]
    position: Literal["top", "bottom"]
    ok: Union[Callable[[], Any], bool]
    cancel: Union[Callable[[], Any], bool]


class InvalidValueError(ValueError):
    """A record passed to ViewStore.set() has neither template+data nor content."""


def is_record(value: object) -> bool:
    return isinstance(value, Mapping)


# Objects that can never carry template+data or content.
_NEVER_VALID = (list, tuple, set, frozenset)


def _present(value: object) -> bool:
    # Any object counts, including an empty mapping. Zero and NaN do not.
    if value is None or value is False or value == "":
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    return True


def validate_value(value: object) -> None:
    """Raise InvalidValueError if value is a malformed record.

    Scalars are always accepted. Sequences, sets and callables are always
    rejected.
    """
    if isinstance(value, _NEVER_VALID) or callable(value):
        raise InvalidValueError(f"expected a scalar or a record, got {type(value).__name__}")
    if not is_record(value):
        return
    if _present(value.get("template")) and _present(value.get("data")):
        return
    if _present(value.get("content")):
        return
    raise InvalidValueError(
        f"expected a record with 'template' and 'data', or 'content'; got keys {list(value)!r}"
    )


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def strictly_equal(a: object, b: object) -> bool:
    """Identity for records and objects, value equality for primitives.

    Deliberately not deep equality: two distinct but equal-looking records
    are different values. Numbers compare across int/float, never with
    bools, and NaN is unequal to everything, itself included.
    """
    if _is_number(a) and a != a:
        return False
    if a is b:
        return True
    if _is_number(a) and _is_number(b):
        return a == b
    if type(a) is type(b) and isinstance(a, (str, bytes)):
        return a == b
    return False
