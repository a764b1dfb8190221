from .fcread import (
    configure,
    make_do_path,
    dumps,
    Token,
    __version__)

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
    SExpression,)

# dialect configs
from .fcread import (
    toks_fc,
    conf_fc,
    conf_lines,)
