r"""
Argbind option descriptors.

Overview
- One descriptor per registered option. It carries the spellings, help text and
  textual default, the "seen" marker, and the Variable the option writes into.
- The option kind is a closed set chosen from the bound variable's type:
  • BoolOption: presence-flag (arity 0); occurrence assigns "true".
  • ScalarOption: int/float/str/tuple[...]/custom converter types; each
    occurrence replaces the value.
  • ContainerOption: list[T]/deque[T]; each occurrence appends one element.
  • NoDefault: stand-in positional consumer when none was registered; it never
    matches and every assignment fails.
- Every kind offers the same capability contract:
  • match(fragment, short, *, delimiters, limit) -> (matched, embedded)
  • assign(*tokens) -> bool
  • arity

Spellings
- Given without dashes: short "o" answers "-o", long "outfile" answers "--outfile".
- Either spelling may be None; an option with neither is the positional consumer.

Introspection & representation
- ArgumentType metaclass derives __typename__ from the class name, publishes
  every name in __introspectable__ as a read-only property, and provides
  stable __repr__/__rich_repr__ implementations.
- Concrete kinds are sealed against subclassing.

Quick example:
    >>> from argbind.variables import Variable
    >>> count = Variable(int)
    >>> option = bind(count, "c", "count", "Number of loops", "13")
    >>> option.arity, option.assign("4"), count.value, option.seen
    (1, True, 4, True)
"""
import functools
import operator
import re

from . import conversions, matching
from .utils import *


class ArgumentType(type):
    """
    Metaclass for option descriptors.

    Responsibilities
    - Expose selected private fields as read-only properties via mirror() for
      every name listed in __introspectable__.
    - Provide readable __repr__/__rich_repr__ for diagnostics.
    - Seal kinds declared with `sealed=True` against subclassing.

    Conventions
    - __typename__ is the class name split on capitals and joined with hyphens
      ("ScalarOption" → "scalar-option"); used in messages and reprs.
    - __displayable__ (if set) narrows which properties __rich_repr__ shows;
      otherwise __introspectable__ is used.
    """
    __introspectable__ = ()
    __displayable__ = Unset

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Concise, stable representation, e.g. scalar-option(short='c', long='count', ...).
            """
            return "%s(%s)" % (
                type(self).__typename__,
                ", ".join(map(functools.partial(operator.mod, "%s=%r"), self.__rich_repr__())),
            )
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers.
            """
            for name in coalesce(type(self).__displayable__, type(self).__introspectable__):
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        if options.get("sealed", False):
            @rename("__init_subclass__")
            def __init_subclass__(cls, **options):  # NOQA: F-841
                raise TypeError(f"type {self.__name__!r} is not an acceptable base type")
            self.__init_subclass__ = classmethod(__init_subclass__)

        return self


def _sanitize_spelling(cls, kind, spelling, /):
    """
    Internal: validate one option spelling (short or long).

    - None is allowed (the spelling is absent).
    - Otherwise a non-empty string with no whitespace and no leading dash.
    """
    if spelling is None:
        return None
    if not isinstance(spelling, str):
        raise TypeError(f"{cls.__typename__} {kind} spelling must be a string")
    if not spelling:
        raise ValueError(f"{cls.__typename__} {kind} spelling cannot be empty")
    if spelling.startswith("-"):
        raise ValueError(f"{cls.__typename__} {kind} spelling {spelling!r} must be given without leading dashes")
    if any(character.isspace() for character in spelling):
        raise ValueError(f"{cls.__typename__} {kind} spelling {spelling!r} cannot contain whitespace")
    return spelling


def _sanitize_text(cls, kind, text, /):
    if text is not None and not isinstance(text, str):
        raise TypeError(f"{cls.__typename__} '{kind}' must be a string")
    return text


class Argument(metaclass=ArgumentType):
    """
    Shared behaviour of every option kind.

    Properties
    - short: str | None      short spelling without the leading '-'.
    - long: str | None       long spelling without the leading '--'.
    - descr: str | None      help text.
    - default: str | None    textual default applied when never seen.
    - seen: bool             set after the first successful assignment.
    - variable: Variable     slot written on assignment.
    """

    __introspectable__ = (
        "short",
        "long",
        "descr",
        "default",
        "seen",
        "variable",
    )
    __displayable__ = (
        "short",
        "long",
        "descr",
        "default",
        "seen",
    )

    def __init__(self, variable, short=None, long=None, descr=None, default=None):
        cls = type(self)
        self._variable = variable
        self._short = _sanitize_spelling(cls, "short", short)
        self._long = _sanitize_spelling(cls, "long", long)
        self._descr = _sanitize_text(cls, "descr", descr)
        self._default = _sanitize_text(cls, "default", default)
        self._seen = False

    @property
    def arity(self):
        """Number of tokens one occurrence consumes."""
        return conversions.arity(self._variable.type)

    @property
    def positional(self):
        """True for the consumer of positional values (no spelling at all)."""
        return self.match(None, True)[0] and self.match(None, False)[0]

    def match(self, fragment, short, *, delimiters=matching.DEFAULT_DELIMITERS, limit=matching.DEFAULT_LIMIT):
        """
        Match a token fragment against this option's short or long spelling.

        See matching.match() for the rules; returns (matched, embedded).
        """
        return matching.match(
            fragment,
            self._short if short else self._long,
            short,
            delimiters=delimiters,
            limit=limit,
        )

    def assign(self, *tokens):
        """
        Convert token(s) into the bound variable.

        Returns True on success and marks the option as seen; on failure the
        variable and the seen marker are left untouched.
        """
        if not conversions.fromstring(self._variable, *tokens):
            return False
        self._seen = True
        return True


class BoolOption(Argument, sealed=True):
    """
    Presence-flag bound to a bool variable.

    Consumes no token: an occurrence assigns "true". An embedded value such as
    "-vfoo" is not consumed by the flag and is parsed as the next token.
    """


class ScalarOption(Argument, sealed=True):
    """
    Single-valued option (int, float, str, tuple[...] or a custom converter type).

    Every occurrence replaces the previous value; tuple types consume one token
    per element.
    """


class ContainerOption(Argument, sealed=True):
    """
    Repeatable option bound to an appendable container (list[T], deque[T]).

    Every occurrence converts one T and appends it; the container is never
    reset while parsing.
    """


class NoDefault(Argument, sealed=True):
    """
    Stand-in positional consumer used when no spelling-less option is registered.

    It never matches a token, consumes nothing and every assignment fails, so a
    stray positional value surfaces as an invalid-value fault.
    """

    def __init__(self):
        super().__init__(None)

    @property
    def arity(self):
        return 0

    @property
    def positional(self):
        return False

    def match(self, fragment, short, *, delimiters=matching.DEFAULT_DELIMITERS, limit=matching.DEFAULT_LIMIT):
        return False, None

    def assign(self, *tokens):
        return False


def bind(variable, short=None, long=None, descr=None, default=None, /):
    """
    Build the descriptor kind matching the variable's declared type.

    - bool → BoolOption
    - appendable container → ContainerOption
    - anything else → ScalarOption
    """
    if variable.type is bool:
        return BoolOption(variable, short, long, descr, default)
    if conversions.is_container(variable.type):
        return ContainerOption(variable, short, long, descr, default)
    return ScalarOption(variable, short, long, descr, default)


__all__ = (
    "Argument",
    "BoolOption",
    "ScalarOption",
    "ContainerOption",
    "NoDefault",
    "bind",
)
