"""
Bound variables.

Python has no references to plain variables, so an option binds to a small
mutable slot instead: a Variable[_T] holds the declared target type and the
current value. The declared type drives everything else (option kind, arity,
converter), the same way the variable's static type would in a compiled host.

Quick example:
    >>> count = Variable(int)
    >>> count.value is None
    True
    >>> ws = Variable(list[int])
    >>> ws.value
    []
"""
from rich.text import Text

from . import conversions
from .utils import Unset


class Variable[_T]:
    """
    Typed, mutable slot an option writes into.

    Parameters
    - type: the target type; any type accepted by conversions.supports().
    - value: starting value. When omitted, containers start empty, bool starts
      False and every other type starts None.

    Raises
    - TypeError: the type cannot be converted from command-line text.
    """

    __slots__ = ("_type", "value")

    def __init__(self, type, value=Unset, /):
        if not conversions.supports(type):
            raise TypeError("variable type %r cannot be bound to an option" % (type,))
        self._type = type
        self.value = conversions.initial(type) if value is Unset else value

    @property
    def type(self):
        return self._type

    def __repr__(self):
        name = self._type.__name__ if isinstance(self._type, type) else repr(self._type)
        return "variable(type=%s, value=%r)" % (name, self.value)

    def __rich__(self):
        return Text.assemble(("variable", "bold"), "(", (repr(self.value), "cyan"), ")")


__all__ = ("Variable",)
