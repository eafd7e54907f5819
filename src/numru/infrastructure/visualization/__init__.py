"""
Text rendering of arrays.

- `VisualizeBuilder`  : deferred, configurable formatter bound to an array
- print options       : global defaults read when a builder executes
"""

from ._options import (
    PrintOptions,
    get_print_options,
    print_options,
    set_print_options,
)
from ._visualize_builder import VisualizeBuilder

__all__ = [
    VisualizeBuilder.__name__,
    PrintOptions.__name__,
    get_print_options.__name__,
    set_print_options.__name__,
    print_options.__name__,
]
