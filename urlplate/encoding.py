"""
Percent-encoding of URI components.
"""

import urllib.parse

# Characters `encodeURIComponent` leaves alone beyond the alphanumerics and
# `-_.~`, which `urllib.parse.quote` never escapes.
COMPONENT_SAFE = "!*'()"


def percent_encode(value: str) -> str:
    r"""
    Escape everything but unreserved characters as UTF-8 `%XX` triplets.

    >>> percent_encode("1;2;3")
    '1%3B2%3B3'

    >>> percent_encode("a b/c?d=e&f#g")
    'a%20b%2Fc%3Fd%3De%26f%23g'

    >>> percent_encode("(it's)*!~")
    "(it's)*!~"

    >>> percent_encode("café")
    'caf%C3%A9'

    Text that isn't valid Unicode, like a lone surrogate left by
    `surrogateescape` decoding, has no UTF-8 form and raises, the same way
    `encodeURIComponent` throws `URIError`:

    >>> percent_encode("bad\udcff")
    Traceback (most recent call last):
        ...
    UnicodeEncodeError: 'utf-8' codec can't encode character '\udcff' in position 3: surrogates not allowed
    """
    return urllib.parse.quote(value, safe=COMPONENT_SAFE)


if __name__ == "__main__":
    import doctest

    doctest.testmod()
