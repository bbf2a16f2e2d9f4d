"""
Turns a `Template` plus a context value into a URL string.
"""

from __future__ import annotations
from typing import *

from .encoding import percent_encode
from .logging import get_logger
from .part import Part
from .template import Template

T = TypeVar('T')

LOG = get_logger(__name__)

PATH_SEPARATOR = "/"
QUERY_SEPARATOR = "&"


def render_part(part: Part[T], ctx: T) -> Optional[str]:
    """`None` when the part is absent, otherwise its (maybe encoded) value."""
    value = part.extract(ctx)
    if value is None or part.skip_encode:
        return value
    return percent_encode(value)


def render_path(ctx: T, template: Template[T]) -> str:
    joined = PATH_SEPARATOR.join(
        value
        for value in (render_part(part, ctx) for part in template.path)
        if value is not None
    )
    if template.prefix == "":
        return PATH_SEPARATOR + joined
    return template.prefix + joined


def render_query(ctx: T, template: Template[T]) -> str:
    entries = []
    for name, part in template.query:
        if (value := render_part(part, ctx)) is None:
            continue
        if name is None:
            entries.append(value)
        else:
            entries.append(f"{percent_encode(name)}={value}")
    return QUERY_SEPARATOR.join(entries)


def render(ctx: T, template: Template[T]) -> str:
    """
    >>> from urlplate.template import root
    >>> render({"q": "a b"}, root().s("search").string_param("q", lambda c: c["q"]))
    '/search?q=a%20b'
    """
    path = render_path(ctx, template)
    query = render_query(ctx, template)
    url = path if query == "" else f"{path}?{query}"
    LOG.debug("Rendered template", url=url)
    return url


if __name__ == "__main__":
    import doctest

    doctest.testmod()
