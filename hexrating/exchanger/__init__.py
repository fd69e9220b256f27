from .parts import (
    UNSET,
    is_unset,
    PartProperties,
    ShellProperties,
    TubeProperties,
    BaffleProperties,
    Exchanger
)

from .loader import load_part, load_exchanger
