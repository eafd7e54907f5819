"""
Array interface definitions.

This module defines the domain-level interface for N-dimensional array
objects using structural typing. Builders (reductions, visualization) and the
element-wise helpers type against `IArray` rather than the concrete NumPy-backed
class, so the domain layer never imports infrastructure code.
"""

from __future__ import annotations

from typing import Any, Iterator, Protocol, Union, runtime_checkable

from ._dtype import DType
from ._shape_index import ShapeIndex

Number = Union[int, float]


@runtime_checkable
class IArray(Protocol):
    """
    N-dimensional homogeneous numeric array.

    An `IArray` exclusively owns one `ShapeIndex` and one flat storage buffer
    whose length equals ``shape_index.element_count()``.

    Notes
    -----
    - Element-wise results, reshapes and reductions always produce new,
      independently owned arrays.
    - `dtype` is the dispatch key for kind-specific behavior.
    """

    @property
    def shape(self) -> tuple[int, ...]:
        """
        Return the extents as a tuple, outermost axis first.
        """
        ...

    @property
    def shape_index(self) -> ShapeIndex:
        """
        Return the full shape descriptor (extents, strides, element count).
        """
        ...

    @property
    def dtype(self) -> DType:
        """
        Return the storage kind.
        """
        ...

    @property
    def ndim(self) -> int: ...

    def numel(self) -> int: ...

    def to_numpy(self) -> Any:
        """
        Return a copy of the data as an N-d NumPy array.
        """
        ...

    def tolist(self) -> list: ...

    def coordinates(self) -> Iterator[tuple[int, ...]]: ...

    def reshape(self, new_shape: Any) -> "IArray": ...

    def fill(self, value: Number) -> None: ...

    def clone(self) -> "IArray": ...

    def __getitem__(self, coordinate: Any) -> Number: ...

    def __setitem__(self, coordinate: Any, value: Number) -> None: ...

    def __add__(self, other: Union["IArray", Number]) -> "IArray": ...

    def __sub__(self, other: Union["IArray", Number]) -> "IArray": ...

    def __mul__(self, other: Union["IArray", Number]) -> "IArray": ...

    def __truediv__(self, other: Union["IArray", Number]) -> "IArray": ...

    def mean(self) -> Any: ...

    def min(self) -> Any: ...

    def max(self) -> Any: ...

    def visualize(self) -> Any: ...
