"""
Concrete N-dimensional array and its dtype control-path manager.
"""

from ._array import Array
from ._array_builder import array_control_path_manager
from .mixins.reduction import ReductionBuilder

__all__ = [
    Array.__name__,
    ReductionBuilder.__name__,
    "array_control_path_manager",
]
