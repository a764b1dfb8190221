from .fcread import (
    configure,
    make_do_path,
    dumps,
    Token,
    tokenize,
    read,
    read_string,
    __version__)

# errors
from .fcread import (
    FcreadError,
    UnknownFormError,
    DispatchNotImplementedError,)

# forms
from .fcread import (
    Literal,
    String,
    List,
    Vector,
    Map,
    Dispatch,)

# expressions
from .walks import (
    Symbol,
    Number,
    SExpression,
    Walk,
    parse,
    conf_parse,
    parse_string,
    parse_lines,
    parse_path,)

# dialect configs
from .fcread import (
    conf_fc,
    conf_lines,)
