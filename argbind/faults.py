"""
Argbind faults (error states, errors and warnings) and rendering.

Scope
- FaultCode: stable numeric identifiers for every user-facing issue.
- ErrorState: the value parse() hands back: OK, an unknown option, or an
  invalid value, carrying only the offending operand/value strings.
- ParseFault and its subclasses: the exception form of a failed ErrorState.
  The engine raises them internally; callers may opt into them through
  ErrorState.check().
- ArgbindWarning and its subclasses: soft diagnostics routed through the
  warnings module (they never change parsing results).
- render(): turn a state or fault into rich Text (optionally a Panel).

Messages
- "No error"
- "Unknown Option: '--bogus'"
- "Invalid Value: 'abc' for option '-c'"
- "Invalid Value: 'x' for option 'default list'"
- a missing operand or value prints as '(null)'

Host customization (read from __main__)
- __styles__: palette overrides (keys listed in _STYLES).
- __codes__: FaultCode → label mapping used by FaultCode.normalize().
- __prog__: program name shown in fancy panels.
"""
from collections import defaultdict
from enum import IntEnum

from rich.panel import Panel
from rich.text import Text

_STYLES = {
    # header parts
    "prog-name": "bold #E6E6F0",  # near-white program name
    "code": "bold #00E5FF",  # neon cyan fault code
    "error-title": "bold #FF4DA6",  # friendly pinky title

    # body
    "error-kind": "bold #FF4DA6",
    "error-message": "#C8C8D0",  # soft light gray message
    "operand": "bold #00E6FF",
    "value": "bold #FFD600",
    "ok": "bold #22C55E",
}


class FaultCode(IntEnum):
    """
    canonical fault codes (stable identifiers).

    grouping
    - 0: ok
    - options (1111x): UNKNOWN_OPTION, INVALID_VALUE
    - warnings (1211x): DUPLICATE_SPELLING, DEFAULT_VALUE
    """
    OK                 = 0

    # --- option errors (11xxx) ---
    UNKNOWN_OPTION     = 11112
    INVALID_VALUE      = 11117

    # --- warnings (12xxx) ---
    DUPLICATE_SPELLING = 12111
    DEFAULT_VALUE      = 12112

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__ to
        override numeric ids with friendlier labels; otherwise the numeric
        value is returned as a string.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


def _quote(text):
    return "'%s'" % ("(null)" if text is None else text)


class ErrorState:
    """
    Outcome of a parse: OK, UNKNOWN_OPTION{operand} or INVALID_VALUE{operand, value}.

    Fields
    - code: FaultCode
    - operand: str | None  the option token as typed ("-c", "--bogus"); "default
      list" for a rejected positional value, None when the value came after "-".
    - value: str | None    the rejected token; None when it was missing.

    Equality compares all three fields, so tests and callers can write
    `state == ErrorState(FaultCode.UNKNOWN_OPTION, "--bogus")`.
    """

    __slots__ = ("_code", "_operand", "_value")

    def __init__(self, code=FaultCode.OK, operand=None, value=None):
        self._code = FaultCode(code)
        self._operand = operand
        self._value = value

    @property
    def code(self):
        return self._code

    @property
    def operand(self):
        return self._operand

    @property
    def value(self):
        return self._value

    @property
    def ok(self):
        return self._code is FaultCode.OK

    def exception(self):
        """
        The exception matching this state, or None when the state is OK.
        """
        match self._code:
            case FaultCode.UNKNOWN_OPTION:
                return UnknownOptionError(self._operand)
            case FaultCode.INVALID_VALUE:
                return InvalidValueError(self._operand, self._value)
            case _:
                return None

    def check(self):
        """
        Raise the matching ParseFault unless the state is OK; return self otherwise.
        """
        if (exception := self.exception()) is not None:
            raise exception
        return self

    def __eq__(self, other):
        if not isinstance(other, ErrorState):
            return NotImplemented
        return (self._code, self._operand, self._value) == (other._code, other._operand, other._value)

    def __hash__(self):
        return hash((self._code, self._operand, self._value))

    def __str__(self):
        match self._code:
            case FaultCode.OK:
                return "No error"
            case FaultCode.UNKNOWN_OPTION:
                return "Unknown Option: %s" % _quote(self._operand)
            case _:
                return "Invalid Value: %s for option %s" % (_quote(self._value), _quote(self._operand))

    def __repr__(self):
        return "error-state(code=%s, operand=%r, value=%r)" % (self._code.name, self._operand, self._value)

    def __rich__(self):
        return render(self)


OK = ErrorState()


class ParseFault(Exception):
    """
    Base of the exceptions mirroring a failed ErrorState.

    The engine raises a ParseFault at the first failing token; Options.parse()
    catches it and returns its state.
    """
    code = FaultCode.OK

    def __init__(self, operand=None, value=None):
        super().__init__(operand, value)
        self.operand = operand
        self.value = value

    @property
    def state(self):
        return ErrorState(self.code, self.operand, self.value)

    def __str__(self):
        return str(self.state)

    def __rich__(self):
        return render(self.state)


class UnknownOptionError(ParseFault):
    """A '-'/'--' token whose spelling matches no registered option."""
    code = FaultCode.UNKNOWN_OPTION

    def __init__(self, operand):
        super().__init__(operand)


class InvalidValueError(ParseFault):
    """A matched option (or the positional consumer) rejected its value."""
    code = FaultCode.INVALID_VALUE


class ArgbindWarning(Warning):
    """Base of argbind's soft diagnostics."""
    code = FaultCode.OK


class DuplicateSpellingWarning(ArgbindWarning):
    """A spelling was registered twice; the first registration wins when matching."""
    code = FaultCode.DUPLICATE_SPELLING


class DefaultValueWarning(ArgbindWarning):
    """A textual default could not be converted; the variable kept its prior value."""
    code = FaultCode.DEFAULT_VALUE


def render(fault, /, *, colorful=True, fancy=False, prog=None):
    """
    Render an ErrorState (or ParseFault) as a one-line rich Text.

    parameters
    - colorful: apply the palette; otherwise plain text.
    - fancy: wrap the line in a Panel titled "[ prog — code | title ]".
    - prog: program name for the panel title (falls back to __main__.__prog__).
    """
    if isinstance(fault, ParseFault):
        fault = fault.state

    main = __import__("__main__")
    styles = defaultdict(str, _STYLES | getattr(main, "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def quoted(fragment, style):
        return Text.assemble("'", ("(null)" if fragment is None else fragment, styler(style)), "'")

    match fault.code:
        case FaultCode.OK:
            title = "no error"
            line = Text("No error", styler("ok"))
        case FaultCode.UNKNOWN_OPTION:
            title = "unknown option"
            line = Text.assemble(("Unknown Option", styler("error-kind")), ": ", quoted(fault.operand, "operand"))
        case _:
            title = "invalid value"
            line = Text.assemble(("Invalid Value", styler("error-kind")), ": ", quoted(fault.value, "value"))
            line.append_text(Text.assemble((" for option ", styler("error-message")), quoted(fault.operand, "operand")))

    if not fancy:
        return line

    prog = prog if prog is not None else getattr(main, "__prog__", None)
    header = Text.assemble(
        "[ ",
        *(((prog, styler("prog-name")), " — ") if prog else ()),
        (fault.code.normalize(), styler("code")),
        " | ",
        (title.title(), styler("error-title")),
        " ]",
    )
    return Panel(line, title=header, title_align="left")


__all__ = (
    "FaultCode",
    "ErrorState",
    "OK",
    "ParseFault",
    "UnknownOptionError",
    "InvalidValueError",
    "ArgbindWarning",
    "DuplicateSpellingWarning",
    "DefaultValueWarning",
    "render",
)
