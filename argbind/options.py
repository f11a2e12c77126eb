"""
Argbind option registry and token consumption engine.

Options owns an ordered list of descriptors (registration order; the first
match in that order wins when spellings collide) and walks a command line with
them.

Token grammar
- ""/None       nothing; skipped.
- "-"           every remaining token is a positional value, even "-x" lookalikes.
- "--name..."   long option: must match a long spelling exactly, optionally
                followed by a delimiter and an embedded value ("--count=4").
- "-x..."       short option: prefix match on a short spelling; the rest, after
                an optional delimiter, is an embedded value ("-c4", "-c=4").
- anything else positional value, handed to the spelling-less option.

Consumption
- An embedded value is pushed back to the front of the queue and consumed like
  any separate token, so "-c4" and "-c 4" behave identically.
- A presence-flag (arity 0) consumes nothing and assigns "true".
- Any other option pops as many tokens as its arity.
- The first failure stops the parse; variables set before it keep their values.
- A rejected positional value is reported against the operand "default list";
  one rejected after "-" carries no operand.
- On success, textual defaults are applied to every option never seen.

Quick example:
    >>> options = Options()
    >>> count = options.register(int, "c", "count", "Number of loops", "13")
    >>> options.parse(["-c4"]).ok, count.value
    (True, 4)
"""
import logging
import warnings
from collections import deque

from . import conversions
from .arguments import NoDefault, bind
from .faults import *
from .matching import DEFAULT_DELIMITERS, DEFAULT_LIMIT, normalize_delimiters
from .variables import Variable

_logger = logging.getLogger(__name__)

# Shared stand-in positional consumer; it can never be assigned, so it never changes.
_NO_DEFAULT = NoDefault()

# Operand reported when a plain positional value is rejected.
POSITIONAL_OPERAND = "default list"


class Options:
    """
    Registry of option descriptors plus the parsing engine.

    Parameters
    - delimiters: str | Iterable[str]
      characters allowed between a spelling and an embedded value; "\\0" (or an
      empty string) disables embedded delimiters. Default "=:".
    - limit: int
      maximum number of spelling characters compared. Default 64.
    """

    def __init__(self, *, delimiters=DEFAULT_DELIMITERS, limit=DEFAULT_LIMIT):
        if not isinstance(limit, int) or isinstance(limit, bool):
            raise TypeError("options 'limit' must be an integer")
        if limit < 1:
            raise ValueError("options 'limit' must be a positive integer")
        self._delimiters = normalize_delimiters(delimiters)
        self._limit = limit
        self._arguments = []

    @property
    def delimiters(self):
        return self._delimiters

    @property
    def limit(self):
        return self._limit

    def register(self, target, short=None, long=None, descr=None, default=None):
        """
        Register one option and return the Variable it writes into.

        Parameters
        - target: Variable | type
          the slot to populate, or a supported type to create a fresh slot for.
        - short: str | None   short spelling without '-', e.g. "o".
        - long: str | None    long spelling without '--', e.g. "outfile".
        - descr: str | None   help text.
        - default: str | Any | None
          value used only when the option never appears, written as it would be
          on the command line ("13"); non-text values are rendered first.

        Notes
        - Duplicate spellings are legal and only warned about
          (DuplicateSpellingWarning): the earlier registration keeps winning.
        - An option with neither spelling receives positional values.
        """
        variable = target if isinstance(target, Variable) else Variable(target)
        if default is not None and not isinstance(default, str):
            default = conversions.tostring(default)

        argument = bind(variable, short, long, descr, default)

        for other in self._arguments:
            if argument.positional and other.positional:
                warnings.warn(DuplicateSpellingWarning(
                    "positional values are already bound to %r; the new option never receives them" % (other,)
                ), stacklevel=2)
            for prefix, spelling, existing in (("-", argument.short, other.short), ("--", argument.long, other.long)):
                if spelling is not None and spelling == existing:
                    warnings.warn(DuplicateSpellingWarning(
                        "option '%s%s' is registered twice; the first registration wins" % (prefix, spelling)
                    ), stacklevel=2)

        self._arguments.append(argument)
        _logger.debug("registered %r", argument)
        return variable

    option = register

    def find_default(self):
        """
        The option receiving positional values, or a stand-in that rejects them.
        """
        for argument in self._arguments:
            if argument.positional:
                return argument
        return _NO_DEFAULT

    def find_arg(self, fragment, short):
        """
        First option (in registration order) whose spelling matches the fragment.

        Returns
        - (argument, embedded): embedded is the value text carried by the token,
          or None.
        - (None, None) when nothing matches.
        """
        for argument in self._arguments:
            matched, embedded = argument.match(fragment, short, delimiters=self._delimiters, limit=self._limit)
            if matched:
                return argument, embedded
        return None, None

    def apply_defaults(self):
        """
        Assign textual defaults to every option not seen during the parse.

        A default that fails to convert leaves its variable unchanged; the
        failure is only reported as a DefaultValueWarning.
        """
        for argument in self._arguments:
            if argument.seen or argument.default is None:
                continue
            tokens = argument.default.split() if argument.arity > 1 else (argument.default,)
            if not argument.assign(*tokens):
                warnings.warn(DefaultValueWarning(
                    "default %r does not convert for %r; the variable keeps its value" % (argument.default, argument)
                ), stacklevel=2)

    def parse(self, tokens):
        """
        Decode tokens (program name excluded) into the bound variables.

        Returns
        - OK after a complete parse (defaults applied).
        - the ErrorState of the first failure otherwise (defaults not applied,
          earlier assignments kept).
        """
        queue = deque(tokens)
        fallback = self.find_default()
        try:
            while queue:
                self._consume(queue, fallback)
        except ParseFault as fault:
            _logger.debug("parse stopped: %s", fault)
            return fault.state
        self.apply_defaults()
        return OK

    def populate(self, argv):
        """
        Same as parse(), but takes a full argument vector and drops argv[0].
        """
        return self.parse(list(argv)[1:])

    def _consume(self, queue, fallback):
        """
        Pop and process one token, raising a ParseFault when it fails.
        """
        token = queue.popleft()

        if not token:
            return

        if token == "-":
            _logger.debug("'-' sends %d remaining token(s) to %r", len(queue), fallback)
            while queue:
                value = queue.popleft()
                if value is None:
                    continue
                if not fallback.assign(value):
                    raise InvalidValueError(None, value)
            return

        if not token.startswith("-"):
            if not fallback.assign(token):
                raise InvalidValueError(POSITIONAL_OPERAND, token)
            return

        short = not token.startswith("--")
        argument, embedded = self.find_arg(token[1:] if short else token[2:], short)
        if argument is None:
            raise UnknownOptionError(token)

        _logger.debug("%r names %r (embedded=%r)", token, argument, embedded)
        if embedded is not None:
            queue.appendleft(embedded)

        if not (arity := argument.arity):
            if not argument.assign("true"):
                raise InvalidValueError(token, "true")
            return

        if len(queue) < arity:
            raise InvalidValueError(token, None)

        values = [queue.popleft() for _ in range(arity)]
        if None in values:
            raise InvalidValueError(token, None)
        if not argument.assign(*values):
            raise InvalidValueError(token, " ".join(values))

    def __iter__(self):
        return iter(tuple(self._arguments))

    def __len__(self):
        return len(self._arguments)

    def __contains__(self, item):
        if isinstance(item, Variable):
            return any(argument.variable is item for argument in self._arguments)
        return any(argument is item for argument in self._arguments)

    def __repr__(self):
        return "options(delimiters=%r, limit=%r, arguments=%r)" % (
            "".join(sorted(self._delimiters)), self._limit, self._arguments
        )

    def __rich_repr__(self):
        yield "delimiters", "".join(sorted(self._delimiters))
        yield "limit", self._limit
        yield "arguments", self._arguments


__all__ = (
    "Options",
    "POSITIONAL_OPERAND",
)
