"""
Scalar kind (dtype) abstraction.

numru supports exactly two storage kinds, modeled as a closed `Enum`:

- `DType.INT64`   : 64-bit signed integers, checked (non-wrapping) arithmetic
- `DType.FLOAT64` : IEEE-754 double precision, NaN/Infinity propagate

The enum owns scalar validation (`coerce`) and literal promotion (`infer`) so
that storage, factories and arithmetic agree on one policy.
"""

from __future__ import annotations

from enum import Enum
from numbers import Integral, Real
from typing import Any, Iterable, Union

import numpy as np

from ._errors import DtypeMismatchError, IntegerOverflowError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

Number = Union[int, float]


class DType(Enum):
    """
    Enumeration of supported storage kinds.

    Attributes
    ----------
    INT64 : DType
        Integral kind backed by ``numpy.int64``.
    FLOAT64 : DType
        Floating kind backed by ``numpy.float64``.
    """

    INT64 = "int64"
    FLOAT64 = "float64"

    def __str__(self) -> str:
        return self.value

    @property
    def numpy_dtype(self) -> np.dtype:
        """
        Return the NumPy dtype used for storage of this kind.
        """
        return np.dtype(self.value)

    @property
    def is_integral(self) -> bool:
        return self is DType.INT64

    @property
    def is_floating(self) -> bool:
        return self is DType.FLOAT64

    @classmethod
    def parse(cls, dtype: Any) -> "DType":
        """
        Normalize a user-facing dtype argument.

        Parameters
        ----------
        dtype : Any
            A `DType`, its string name (``"int64"`` / ``"float64"``) or a NumPy
            dtype-like equal to one of them.

        Returns
        -------
        DType
            The matching kind.

        Raises
        ------
        DtypeMismatchError
            If the argument does not name one of the two supported kinds.
        """
        if isinstance(dtype, DType):
            return dtype
        if isinstance(dtype, str):
            for member in cls:
                if member.value == dtype:
                    return member
        else:
            try:
                np_dt = np.dtype(dtype)
            except TypeError:
                np_dt = None
            for member in cls:
                if np_dt == member.numpy_dtype:
                    return member
        raise DtypeMismatchError("int64 or float64", repr(dtype))

    @staticmethod
    def _is_scalar(value: Any) -> bool:
        if isinstance(value, (bool, np.bool_)):
            return False
        return isinstance(value, Real)

    @classmethod
    def infer(cls, values: Iterable[Any]) -> "DType":
        """
        Infer the kind for a collection of literal scalars.

        Returns `FLOAT64` if any value is a non-integral real (a float),
        otherwise `INT64`.

        Raises
        ------
        TypeError
            If a value is not a real number (booleans included).
        """
        kind = cls.INT64
        for v in values:
            if not cls._is_scalar(v):
                raise TypeError(f"Unsupported element type: {type(v)!r}")
            if not isinstance(v, Integral):
                kind = cls.FLOAT64
        return kind

    def coerce(self, value: Any) -> Number:
        """
        Validate one scalar against this kind and convert it to a Python number.

        Parameters
        ----------
        value : Any
            Scalar to convert.

        Returns
        -------
        int or float
            ``int`` for `INT64`, ``float`` for `FLOAT64`.

        Raises
        ------
        TypeError
            If `value` is not a real number.
        DtypeMismatchError
            If a non-integral value is given for `INT64`.
        IntegerOverflowError
            If an integral value does not fit in int64.
        """
        if not self._is_scalar(value):
            raise TypeError(f"Unsupported element type: {type(value)!r}")

        if self is DType.FLOAT64:
            return float(value)

        if not isinstance(value, Integral):
            raise DtypeMismatchError(self.value, type(value).__name__)
        ivalue = int(value)
        if ivalue < INT64_MIN or ivalue > INT64_MAX:
            raise IntegerOverflowError("coerce", ivalue)
        return ivalue
