"""
Small helpers used across argbind.

- Unset: "argument not given" marker for keyword defaults where None already
  means something (a missing spelling, a missing help text).
- coalesce(): swap Unset for a fallback.
- rename(): give functions built inside the descriptor metaclass a proper name.
- mirror(): read-only property over "_name"; lists, dicts and sets come back as
  copies, so a descriptor's state cannot be edited through its properties.

    >>> coalesce(Unset, "h")
    'h'
    >>> coalesce(None, "h") is None
    True
"""
import builtins
import functools
from collections.abc import Mapping, Sequence, Set
from typing import final


@final
class UnsetType:
    """
    Type of the Unset marker; there is exactly one instance and no subclass.

    Unset is falsy, prints as "Unset" and composes into unions with types
    (`str | Unset`) so it can be used directly in isinstance() checks.
    """

    @functools.cache
    def __new__(cls):
        return super().__new__(cls)

    def __init_subclass__(cls, **options):
        raise TypeError("type 'UnsetType' is not an acceptable base type")

    def __or__(self, other, /):
        try:
            return other | type(self)
        except TypeError:
            return NotImplemented

    __ror__ = __or__

    def __bool__(self):
        return False

    def __repr__(self):
        return "Unset"


def coalesce(object, default=None, /):
    """Return `default` when `object` is Unset, `object` otherwise (None included)."""
    return default if object is Unset else object


def _set_name(function, name):
    if not builtins.callable(function):
        raise TypeError("rename() target must be callable")
    if not isinstance(name, str):
        raise TypeError("rename() name must be a string")
    try:
        function.__name__ = function.__qualname__ = name
    except (AttributeError, TypeError):
        raise TypeError("rename() target %r does not accept a new name" % (function,)) from None
    return function


def rename(*parameters):
    """
    rename(function, name) renames in place and returns the function;
    rename(name) returns a decorator doing the same.
    """
    match parameters:
        case (function, name):
            return _set_name(function, name)
        case (name,):
            if not isinstance(name, str):
                raise TypeError("@rename() argument must be a string")

            def decorator(function):
                return _set_name(function, name)

            return _set_name(decorator, "rename")
        case _:
            raise TypeError("rename takes 1 to 2 arguments but %d were given" % len(parameters))


def _detach(object):
    # copy containers all the way down; strings stay as they are
    if isinstance(object, str):
        return object
    if isinstance(object, Mapping):
        return {key: _detach(value) for key, value in object.items()}
    if isinstance(object, Sequence):
        return [_detach(item) for item in object]
    if isinstance(object, Set):
        return {_detach(item) for item in object}
    return object


def mirror(name, /):
    """Read-only property returning a detached copy of `self._<name>`."""
    if not isinstance(name, str):
        raise TypeError("mirror() argument must be a string")
    attribute = "_" + name

    @rename(name)
    def getter(self):
        return _detach(getattr(self, attribute))

    return property(getter)


Unset = UnsetType()


__all__ = (
    "coalesce",
    "rename",
    "mirror",
    "UnsetType",
    "Unset",
)
