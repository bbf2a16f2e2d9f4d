"""
Parts: the units a URL template is built from.

A `Part` pairs an `extract` function, which derives a string (or `None`,
meaning "leave me out") from the render context, with a `skip_encode` flag.
Every constructor here is a thin wrapper producing one of those.

>>> literal("users").extract(None)
'users'

>>> integer(lambda ctx: ctx["id"]).extract({"id": 42})
'42'

>>> optional_boolean(lambda ctx: ctx.get("show")).extract({}) is None
True
"""

# pylint: disable=redefined-builtin,invalid-name

from __future__ import annotations
from typing import *
from dataclasses import dataclass

from .util import check_arg, check_fn

T = TypeVar('T')
V = TypeVar('V')


@dataclass(frozen=True)
class Part(Generic[T]):
    extract: Callable[[T], Optional[str]]
    skip_encode: bool = False


def _map_optional(
    fn: Callable[[T], Optional[V]],
    to_s: Callable[[V], str],
) -> Callable[[T], Optional[str]]:
    def extract(ctx: T) -> Optional[str]:
        value = fn(ctx)
        return None if value is None else to_s(value)
    return extract


def _lift(
    fn: Callable[[T], V],
    to_s: Callable[[V], str],
) -> Callable[[T], Optional[str]]:
    return lambda ctx: to_s(fn(ctx))


def _format_int(value: int) -> str:
    return format(value, "d")


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _identity(value: str) -> str:
    return value


def literal(value: str) -> Part[Any]:
    check_arg("value", value, str)
    return Part(lambda _ctx: value)


def optional_literal(value: Optional[str]) -> Part[Any]:
    """
    >>> optional_literal(None).extract({}) is None
    True
    """
    check_arg("value", value, Optional[str])
    return Part(lambda _ctx: value)


def integer(fn: Callable[[T], int]) -> Part[T]:
    return Part(_lift(check_fn("fn", fn), _format_int))


def optional_integer(fn: Callable[[T], Optional[int]]) -> Part[T]:
    return Part(_map_optional(check_fn("fn", fn), _format_int))


def string(fn: Callable[[T], str]) -> Part[T]:
    return Part(_lift(check_fn("fn", fn), _identity))


def optional_string(fn: Callable[[T], Optional[str]]) -> Part[T]:
    return Part(check_fn("fn", fn))


def boolean(fn: Callable[[T], bool]) -> Part[T]:
    """
    >>> boolean(lambda ctx: ctx).extract(False)
    'false'
    """
    return Part(_lift(check_fn("fn", fn), _format_bool))


def optional_boolean(fn: Callable[[T], Optional[bool]]) -> Part[T]:
    return Part(_map_optional(check_fn("fn", fn), _format_bool))


def custom(fn: Callable[[T], str]) -> Part[T]:
    """
    Caller-formatted value, percent-encoded on render.

    >>> custom(lambda ctx: ";".join(map(str, ctx))).extract([1, 2, 3])
    '1;2;3'
    """
    return Part(_lift(check_fn("fn", fn), _identity))


def optional_custom(fn: Callable[[T], Optional[str]]) -> Part[T]:
    return Part(check_fn("fn", fn))


def custom_raw(fn: Callable[[T], str]) -> Part[T]:
    """Like `custom`, but rendered verbatim, reserved characters and all."""
    return Part(_lift(check_fn("fn", fn), _identity), skip_encode=True)


def optional_custom_raw(fn: Callable[[T], Optional[str]]) -> Part[T]:
    return Part(check_fn("fn", fn), skip_encode=True)


if __name__ == "__main__":
    import doctest

    doctest.testmod()
