"""
State-based method dispatch ("control paths") via decorators.

This module provides a small mechanism for routing a single method call to
one of several registered implementations based on the value of a named
attribute on the receiving object.

Core idea
---------
- You define a *base* method on a class (its signature and docstring become
  the canonical ones).
- You register one implementation ("control path") per state value, keyed by
  ``(ClassName, MethodName, StateVal)``.
- At runtime, the installed wrapper reads ``getattr(self, state_attr)`` and
  calls the implementation registered for that value as
  ``impl(self, *args, **kwargs)``.

In numru the state attribute is ``dtype``: integral and floating arrays get
separate implementations of arithmetic, filling and reductions without
if/elif chains in every operation.

Important notes
---------------
- The first registration for a method replaces ``cls.<method>`` with the
  dispatching wrapper. Subclasses inherit the wrapper through normal MRO.
- Registered implementations are stored in a mapping owned by the builder
  returned from `create_path_builder`; different builders do not share it.
"""

from typing import (
    Callable,
    Hashable,
    Optional,
    Union,
    Dict,
    Type,
    Any,
)
from typing_extensions import ParamSpec, TypeVar
from collections import namedtuple
from functools import wraps

P = ParamSpec("P")
R = TypeVar("R")

_MISSING = object()


def create_path_builder(state_attr: str) -> Callable[
    [
        Type,
        Callable[P, R],
        Hashable,
        Optional[Union[Exception, Callable[[Callable[P, R], Any], None]]],
    ],
    Callable[[Callable[P, R]], Callable[P, R]],
]:
    """
    Create a "path builder" that registers control paths keyed on `state_attr`.

    Usage::

        on_dtype = create_path_builder("dtype")

        class Thing:
            def op(self, x): ...

        @on_dtype(Thing, Thing.op, DType.INT64)
        def op_int(self, x): ...

        @on_dtype(Thing, Thing.op, DType.FLOAT64)
        def op_float(self, x): ...

    Parameters
    ----------
    state_attr : str
        Name of the attribute (usually a property) whose runtime value selects
        the implementation.

    Returns
    -------
    Callable
        ``templator(cls, method, state, trap_exception=None) -> decorator``.
    """

    MethodKey = namedtuple(
        "MethodKey",
        [
            "ClassName",
            "MethodName",
            "StateVal",
        ],
    )

    methods_map: Dict[MethodKey, Callable] = {}
    """Mapping from (class, method, state) keys to registered implementations."""

    def templator(
        cls: Type,
        method: Callable[P, R],
        state: Hashable,
        trap_exception: Optional[
            Union[Exception, Callable[[Callable[P, R], Any], None]]
        ] = None,
    ) -> Callable[[Callable[P, R]], Callable[P, R]]:
        """
        Build a decorator that registers a control path implementation.

        Parameters
        ----------
        cls : Type
            Class on which the dispatching wrapper is installed.
        method : Callable[P, R]
            The base method being templated. Its metadata is copied onto the
            wrapper via `functools.wraps`. Passing an already-installed wrapper
            is fine; it keeps the original name.
        state : Hashable
            The state value selecting the decorated implementation.
        trap_exception : optional
            What to do when no implementation matches at call time:

            - ``None``: raise `NotImplementedError`.
            - an exception class: raise it with a descriptive message.
            - an exception instance: raise it as-is.
            - any other callable: call ``trap_exception(method, state)`` (e.g.
              for reporting), then raise `NotImplementedError`.

        Raises
        ------
        TypeError
            If `state` is not hashable.
        """
        try:
            hash(state)
        except TypeError:
            raise TypeError(
                f"The argument for 'state' must be hashable. Got {state!r}"
            ) from None

        smk: MethodKey = MethodKey(cls.__name__, method.__name__, state)

        def decorator(sub_method: Callable[P, R]) -> Callable[P, R]:
            methods_map[smk] = sub_method

            # Re-registration wraps the original base method, never a wrapper.
            base = getattr(method, "__control_path_base__", method)

            @wraps(base)
            def wrapper(self: Any, *args: P.args, **kwargs: P.kwargs) -> Any:
                cur = getattr(self, state_attr, _MISSING)
                if cur is _MISSING:
                    raise NotImplementedError(
                        "{} is missing attribute {}".format(type(self), repr(state_attr))
                    )
                key = MethodKey(cls.__name__, base.__name__, cur)
                if sm := methods_map.get(key):
                    return sm(self, *args, **kwargs)
                message = "Missing control path ({}={}) for {}".format(
                    state_attr, repr(cur), repr(base)
                )
                if trap_exception is None:
                    raise NotImplementedError(message)
                if isinstance(trap_exception, type) and issubclass(
                    trap_exception, BaseException
                ):
                    raise trap_exception(message)
                if isinstance(trap_exception, BaseException):
                    raise trap_exception
                trap_exception(base, cur)
                raise NotImplementedError(message)

            wrapper.__control_path_base__ = base
            setattr(cls, base.__name__, wrapper)
            return sub_method

        return decorator

    return templator
