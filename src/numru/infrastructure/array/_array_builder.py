"""
Array control-path manager for dtype-specific dispatch.

This module defines the shared control-path manager used to register and
resolve kind-specific implementations of Array methods.

The manager is created by specializing the generic `create_path_builder`
utility with the state attribute name ``"dtype"``. As a result, method
dispatch is performed based on the runtime value of ``self.dtype``.

Typical usage
-------------
Kind-specific implementations register themselves using this manager:

    @array_control_path_manager(ArrayMixin, ArrayMixin.op, DType.INT64)
    def op_int64(self, ...): ...

    @array_control_path_manager(ArrayMixin, ArrayMixin.op, DType.FLOAT64)
    def op_float64(self, ...): ...

At runtime, calling ``Array.op(...)`` dispatches to the implementation whose
registered dtype matches ``self.dtype``.
"""

from ...domain.utils._control_path import create_path_builder

# Control-path manager that dispatches Array methods based on `self.dtype`
array_control_path_manager = create_path_builder("dtype")
