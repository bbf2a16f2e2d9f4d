from .encoding import percent_encode
from .errors import ArgTypeError
from .part import (
    Part,
    boolean,
    custom,
    custom_raw,
    integer,
    literal,
    optional_boolean,
    optional_custom,
    optional_custom_raw,
    optional_integer,
    optional_literal,
    optional_string,
    string,
)
from .template import (
    QueryParam,
    Template,
    append,
    append_bare_param,
    append_hash,
    append_param,
    custom_root,
    root,
)
from .rendering import render
