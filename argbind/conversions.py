"""
Argbind type conversions.

Scope
- Turn raw command-line text into typed values for the bound variables.
- Describe how many tokens one occurrence of an option consumes (its arity).
- Render typed values back into the textual form used by defaults and help.

Target types
- bool: presence-flag (arity 0). Text form is case-insensitive:
  "1" / "true" / "yes" / "enable" and "0" / "false" / "no" / "disable".
- int: leading-numeral scan with automatic base (0x → hex, 0 → octal), trailing
  garbage ignored; no digits → failure.
- float: leading floating-literal scan (decimal, exponent, hex floats, inf/nan);
  nothing scanned → failure.
- str: verbatim; never fails.
- tuple[T1, ..., Tn]: composite value consuming n tokens, converted element-wise.
- list[T] / deque[T]: appendable containers; every occurrence converts one T
  and appends it (repeatable options).
- any type registered through @converter(T).

Failure contract
- Converters raise ValueError; fromstring() turns that into a False result and
  leaves the variable untouched.

Quick example:
    >>> from pathlib import Path
    >>> @converter(Path)
    ... def _(token):
    ...     return Path(token)
    ...
    >>> arity(list[int]), arity(bool), arity(tuple[int, int])
    (1, 0, 2)
"""
import builtins
import re
import typing

_converters = {}

_TRUTHS = frozenset(("1", "true", "yes", "enable"))
_LIES = frozenset(("0", "false", "no", "disable"))

# C locale whitespace, optional sign, then hex / octal / decimal digits.
_INTEGER = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))")

_FLOAT = re.compile(r"""
    [ \t\n\v\f\r]*
    (?P<number>
        (?P<sign>[+-]?)
        (?:
            (?P<hex>0x(?:[0-9a-f]+\.?[0-9a-f]*|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)
          | (?P<inf>inf(?:inity)?)
          | (?P<nan>nan(?:\([0-9a-z_]*\))?)
          | (?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?
        )
    )
""", re.VERBOSE | re.IGNORECASE)


def converter(type, /):
    """
    Register a text → value converter for a target type.

    The decorated function receives exactly one token and must either return
    the converted value or raise ValueError. Registering a type twice replaces
    the previous converter.
    """
    if not isinstance(type, builtins.type):
        raise TypeError("converter() argument must be a type")

    def wrapper(function):
        if not callable(function):
            raise TypeError("@converter() must be applied to a callable")
        _converters[type] = function
        return function

    return wrapper


@converter(bool)
def _parse_bool(token):
    if (lowered := token.lower()) in _TRUTHS:
        return True
    elif lowered in _LIES:
        return False
    raise ValueError("invalid boolean spelling %r" % token)


@converter(int)
def _parse_int(token):
    if not (match := _INTEGER.match(token)):
        raise ValueError("no digits in %r" % token)
    sign, hexadecimal, octal, decimal = match.groups()
    if hexadecimal is not None:
        value = int(hexadecimal, 16)
    elif octal is not None:
        value = int(octal, 8)
    else:
        # past sys.get_int_max_str_digits() this raises ValueError instead of clamping like strtol
        value = int(decimal)
    return -value if sign == "-" else value


@converter(float)
def _parse_float(token):
    if not (match := _FLOAT.match(token)):
        raise ValueError("no floating literal in %r" % token)
    if match["hex"]:
        return float.fromhex(match["number"])
    if match["inf"]:
        return float(match["sign"] + "inf")
    if match["nan"]:
        return float(match["sign"] + "nan")
    return float(match["number"])


@converter(str)
def _parse_str(token):
    return token


def _origin(type):
    return typing.get_origin(type) or type


def is_container(type, /):
    """
    Tell whether a target type is an appendable container (list, deque, ...).

    Strings and tuples are values, not containers.
    """
    origin = _origin(type)
    return (
        isinstance(origin, builtins.type)
        and not issubclass(origin, (str, bytes, bytearray, tuple))
        and callable(getattr(origin, "append", None))
    )


def is_composite(type, /):
    """Tell whether a target type is a fixed-size tuple[...] consuming several tokens."""
    return _origin(type) is tuple


def element(type, /):
    """
    Return the element type of a container (str when the container is bare).
    """
    if not is_container(type):
        raise TypeError("%r is not an appendable container type" % (type,))
    match typing.get_args(type):
        case ():
            return str
        case (item,):
            return item
        case _:
            raise TypeError("container type %r must have exactly one element type" % (type,))


def supports(type, /):
    """
    Tell whether variables of the given type can be bound to an option.
    """
    if is_container(type):
        try:
            item = element(type)
        except TypeError:
            return False
        return not is_container(item) and supports(item)
    if is_composite(type):
        items = typing.get_args(type)
        return bool(items) and Ellipsis not in items and all(
            not is_container(item) and not is_composite(item) and supports(item)
            for item in items
        )
    return isinstance(type, builtins.type) and type in _converters


def arity(type, /):
    """
    Number of tokens one occurrence of an option bound to this type consumes.

    - bool → 0 (presence-flag)
    - tuple[T1, ..., Tn] → n
    - container of T → arity of T, but at least 1 (list[bool] takes a value)
    - anything else → 1
    """
    if is_container(type):
        return max(1, arity(element(type)))
    if is_composite(type):
        return len(typing.get_args(type))
    return 0 if type is bool else 1


def initial(type, /):
    """
    Starting value for a fresh variable: an empty container, False for bool, otherwise None.
    """
    if is_container(type):
        return _origin(type)()
    return False if type is bool else None


def parse_value(type, /, *tokens):
    """
    Convert token(s) to a value of the given (non-container) type.

    Raises
    - ValueError: the token(s) do not spell a value of that type, or the number
      of tokens does not match a composite type.
    - TypeError: the type is not supported.
    """
    if is_composite(type):
        items = typing.get_args(type)
        if len(tokens) != len(items):
            raise ValueError("%r expects %d values, got %d" % (type, len(items), len(tokens)))
        return tuple(parse_value(item, token) for item, token in zip(items, tokens))

    try:
        function = _converters[type]
    except (KeyError, TypeError):
        raise TypeError("no converter registered for %r" % (type,)) from None

    if len(tokens) != 1:
        raise ValueError("%r expects a single value, got %d" % (type, len(tokens)))
    return function(tokens[0])


def fromstring(variable, /, *tokens):
    """
    Convert token(s) and store the result into a bound variable.

    Containers receive one more element per call; everything else is replaced.
    Returns True on success. On failure the variable is left unchanged and False
    is returned.
    """
    try:
        if is_container(variable.type):
            value = parse_value(element(variable.type), *tokens)
            variable.value.append(value)
        else:
            variable.value = parse_value(variable.type, *tokens)
    except ValueError:
        return False
    return True


def tostring(value, /):
    """
    Render a typed value in the textual form used for defaults and help.

    The result converts back to an equal value through parse_value(); floats use
    repr() so they keep full precision. Tuples render as space-separated items.
    """
    match value:
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case int():
            return str(value)
        case float():
            return repr(value)
        case tuple():
            return " ".join(map(tostring, value))
        case _:
            raise TypeError("cannot render %r as an option value" % (value,))


__all__ = (
    "converter",
    "is_container",
    "is_composite",
    "element",
    "supports",
    "arity",
    "initial",
    "parse_value",
    "fromstring",
    "tostring",
)
