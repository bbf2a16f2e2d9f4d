"""
Immutable, append-only URL templates.

Start from `root()` or `custom_root(prefix)` and grow the template one part at
a time. Every method returns a *new* `Template`, so a built template can be
shared and rendered any number of times:

>>> from collections import namedtuple
>>> Ctx = namedtuple("Ctx", "user_id show")
>>> users = root().s("users").integer(lambda c: c.user_id)
>>> detail = users.boolean_param("show", lambda c: c.show)
>>> users.render(Ctx(user_id=42, show=True))
'/users/42'
>>> detail.render(Ctx(user_id=42, show=True))
'/users/42?show=true'
>>> Ctx(user_id=7, show=False) @ detail
'/users/7?show=false'
"""

# pylint: disable=redefined-builtin,invalid-name

from __future__ import annotations
from typing import *
from dataclasses import dataclass, field, replace

from . import part as P
from .part import Part
from .util import check_arg

T = TypeVar('T')

HASH = "#"


class QueryParam(NamedTuple):
    """A query entry. `name` is `None` for a bare fragment."""

    name: Optional[str]
    part: Part


@dataclass(frozen=True)
class Template(Generic[T]):
    prefix: str = ""
    path: Tuple[Part[T], ...] = field(default_factory=tuple)
    query: Tuple[QueryParam, ...] = field(default_factory=tuple)
    hash_emitted: bool = False

    def render(self, ctx: T) -> str:
        from .rendering import render

        return render(ctx, self)

    def __rmatmul__(self, ctx: T) -> str:
        return self.render(ctx)

    # Path
    # ========================================================================

    def part(self, part: Part[T]) -> Template[T]:
        return append(part, self)

    def s(self, value: str) -> Template[T]:
        return append(P.literal(value), self)

    def maybe_s(self, value: Optional[str]) -> Template[T]:
        return append(P.optional_literal(value), self)

    def integer(self, fn: Callable[[T], int]) -> Template[T]:
        return append(P.integer(fn), self)

    def maybe_integer(self, fn: Callable[[T], Optional[int]]) -> Template[T]:
        return append(P.optional_integer(fn), self)

    def string(self, fn: Callable[[T], str]) -> Template[T]:
        return append(P.string(fn), self)

    def maybe_string(self, fn: Callable[[T], Optional[str]]) -> Template[T]:
        return append(P.optional_string(fn), self)

    def boolean(self, fn: Callable[[T], bool]) -> Template[T]:
        return append(P.boolean(fn), self)

    def maybe_boolean(
        self, fn: Callable[[T], Optional[bool]]
    ) -> Template[T]:
        return append(P.optional_boolean(fn), self)

    def custom(self, fn: Callable[[T], str]) -> Template[T]:
        return append(P.custom(fn), self)

    def maybe_custom(self, fn: Callable[[T], Optional[str]]) -> Template[T]:
        return append(P.optional_custom(fn), self)

    def custom_raw(self, fn: Callable[[T], str]) -> Template[T]:
        return append(P.custom_raw(fn), self)

    def maybe_custom_raw(
        self, fn: Callable[[T], Optional[str]]
    ) -> Template[T]:
        return append(P.optional_custom_raw(fn), self)

    def hash(self) -> Template[T]:
        return append_hash(self)

    # Query
    # ========================================================================

    def param(self, name: str, part: Part[T]) -> Template[T]:
        return append_param(name, part, self)

    def s_param(self, name: str, value: str) -> Template[T]:
        return append_param(name, P.literal(value), self)

    def maybe_s_param(self, name: str, value: Optional[str]) -> Template[T]:
        return append_param(name, P.optional_literal(value), self)

    def integer_param(
        self, name: str, fn: Callable[[T], int]
    ) -> Template[T]:
        return append_param(name, P.integer(fn), self)

    def maybe_integer_param(
        self, name: str, fn: Callable[[T], Optional[int]]
    ) -> Template[T]:
        return append_param(name, P.optional_integer(fn), self)

    def string_param(self, name: str, fn: Callable[[T], str]) -> Template[T]:
        return append_param(name, P.string(fn), self)

    def maybe_string_param(
        self, name: str, fn: Callable[[T], Optional[str]]
    ) -> Template[T]:
        return append_param(name, P.optional_string(fn), self)

    def boolean_param(
        self, name: str, fn: Callable[[T], bool]
    ) -> Template[T]:
        return append_param(name, P.boolean(fn), self)

    def maybe_boolean_param(
        self, name: str, fn: Callable[[T], Optional[bool]]
    ) -> Template[T]:
        return append_param(name, P.optional_boolean(fn), self)

    def custom_param(self, name: str, fn: Callable[[T], str]) -> Template[T]:
        return append_param(name, P.custom(fn), self)

    def maybe_custom_param(
        self, name: str, fn: Callable[[T], Optional[str]]
    ) -> Template[T]:
        return append_param(name, P.optional_custom(fn), self)

    def custom_raw_param(
        self, name: str, fn: Callable[[T], str]
    ) -> Template[T]:
        return append_param(name, P.custom_raw(fn), self)

    def maybe_custom_raw_param(
        self, name: str, fn: Callable[[T], Optional[str]]
    ) -> Template[T]:
        return append_param(name, P.optional_custom_raw(fn), self)

    def bare_param(self, fn: Callable[[T], str]) -> Template[T]:
        """
        Splice `fn`'s output into the query as-is, with no `name=`.

        >>> root().s_param("a", "1").bare_param(lambda _: "b=2&c").render(None)
        '/?a=1&b=2&c'
        """
        return append_bare_param(P.custom_raw(fn), self)

    def maybe_bare_param(
        self, fn: Callable[[T], Optional[str]]
    ) -> Template[T]:
        return append_bare_param(P.optional_custom_raw(fn), self)


def root() -> Template[Any]:
    """
    >>> root().render(None)
    '/'
    """
    return Template()


def custom_root(prefix: str) -> Template[Any]:
    """
    A root with a fixed prefix, ending in exactly one `/`.

    >>> custom_root("http://example.com:8080").prefix
    'http://example.com:8080/'
    >>> custom_root("http://example.com:8080/").prefix
    'http://example.com:8080/'
    >>> custom_root("") == root()
    True
    """
    check_arg("prefix", prefix, str)
    if prefix != "" and not prefix.endswith("/"):
        prefix += "/"
    return Template(prefix=prefix)


def append(part: Part[T], template: Template[T]) -> Template[T]:
    check_arg("part", part, Part)
    return replace(template, path=(*template.path, part))


def append_param(
    name: str,
    part: Part[T],
    template: Template[T],
) -> Template[T]:
    check_arg("name", name, str)
    check_arg("part", part, Part)
    return replace(template, query=(*template.query, QueryParam(name, part)))


def append_bare_param(part: Part[T], template: Template[T]) -> Template[T]:
    check_arg("part", part, Part)
    return replace(template, query=(*template.query, QueryParam(None, part)))


def append_hash(template: Template[T]) -> Template[T]:
    """
    Append a `#` segment. Only the first one on a template goes out raw; any
    after that are encoded like any other literal.

    >>> append_hash(append_hash(root())).render(None)
    '/#/%23'
    """
    if template.hash_emitted:
        return append(P.literal(HASH), template)
    return replace(
        append(P.custom_raw(lambda _ctx: HASH), template),
        hash_emitted=True,
    )
