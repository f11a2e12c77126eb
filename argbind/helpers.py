"""
Argbind convenience front-end.

Scope
- Helper: explicit configuration of the help switch and of the output style.
  Its `flag` variable is what the injected help option writes into; nothing is
  kept at module level.
- populate_with_help(): register the help switch once, populate the options
  from argv, then print either the failure or the help listing and tell the
  caller whether to exit.
- listing()/describe(): the help listing, one line per option:

      -o, --outfile<TAB>Output file name (default: 'out.dat')

  The positional consumer has no spelling and is left out; empty defaults are
  not shown.

Palette
- Keys of _STYLES may be overridden through a __styles__ mapping in __main__.
  Styling applies only when the Helper is colorful.

Quick example:
    >>> import io
    >>> from argbind import Options
    >>> options = Options()
    >>> outfile = options.register(str, "o", "outfile", "Output file name", "out.dat")
    >>> sink = io.StringIO()
    >>> populate_with_help(options, ["prog", "--help"], sink)
    True
"""
import os
from collections import defaultdict

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .faults import render
from .utils import *
from .variables import Variable

_STYLES = {
    "usage-section": "bold #36C5F0",  # SKY-BLUE usage block
    "option-name": "bold #00E6FF",  # CYAN for value-bearing options
    "flag-name": "bold #22C55E",  # GREEN for presence-flags
    "argument-description": "#9CA3AF",  # muted gray help text
    "default-label": "italic #737373",
    "default-value": "bold #FFD600",  # AMBER default values
    "panel-title": "bold #FF4D94",
}


def _styles():
    return defaultdict(str, _STYLES | getattr(__import__("__main__"), "__styles__", {}))


def describe(argument, /, *, colorful=False):
    """
    One help line for an option, or None for the positional consumer.
    """
    if argument.positional:
        return None

    styles = _styles()

    def styler(style):
        return styles[style] if colorful else ""

    style = styler("flag-name" if argument.arity == 0 else "option-name")
    line = Text("  ")
    if argument.short is not None:
        line.append("-" + argument.short, style)
    if argument.short is not None and argument.long is not None:
        line.append(", ")
    if argument.long is not None:
        line.append("--" + argument.long, style)
    if argument.descr is not None:
        line.append("\t").append(argument.descr, styler("argument-description"))
    if argument.default:
        line.append_text(Text.assemble(
            (" (default: ", styler("default-label")),
            "'",
            (argument.default, styler("default-value")),
            "'",
            (")", styler("default-label")),
        ))
    return line


def listing(options, /, *, colorful=False):
    """
    The help listing for every option, in registration order.
    """
    lines = filter(None, (describe(argument, colorful=colorful) for argument in options))
    return Text("\n").join(lines)


class Helper:
    """
    Configuration of the convenience front-end.

    Parameters
    - usage: Unset | str   text printed above the listing when help is shown.
    - short/long/descr     spellings and help text of the injected help switch.
    - colorful: bool       apply the palette to help and error output.
    - fancy: bool          wrap help and error output in panels.

    Attributes
    - flag: Variable[bool] written by the help switch; `requested` reads it.
    """

    def __init__(self, usage=Unset, *, short="h", long="help", descr="Display help.", colorful=False, fancy=False):
        if not isinstance(usage, str | Unset):
            raise TypeError("helper 'usage' must be a string")
        self._usage = coalesce(usage)
        self._short = short
        self._long = long
        self._descr = descr
        self._colorful = bool(colorful)
        self._fancy = bool(fancy)
        self.flag = Variable(bool)

    usage = mirror("usage")
    short = mirror("short")
    long = mirror("long")
    descr = mirror("descr")
    colorful = mirror("colorful")
    fancy = mirror("fancy")

    @property
    def requested(self):
        return self.flag.value

    def __repr__(self):
        return "helper(usage=%r, short=%r, long=%r, requested=%r)" % (
            self._usage, self._short, self._long, self.requested
        )


def _console(sink):
    if sink is Unset:
        return Console(stderr=True)
    if isinstance(sink, Console):
        return sink
    if not callable(getattr(sink, "write", None)):
        raise TypeError("populate_with_help() sink must be a rich Console or a writable text stream")
    return Console(file=sink)


def populate_with_help(options, argv, sink=Unset, /, helper=Unset):
    """
    Populate options from a full argument vector with a built-in help switch.

    behavior
    - registers the helper's switch (once per Options instance; a presence-flag
      already registered under the same spellings is reused).
    - clears the switch, so help is reported only when this argv asks for it.
    - runs options.populate(argv) (argv[0] is the program name).
    - on failure: prints the one-line error message and returns True.
    - on help requested: prints the usage text (if any) and the listing, returns True.
    - otherwise returns False: the caller carries on.

    parameters
    - sink: rich Console | text stream; defaults to a stderr Console.
    - helper: Helper; defaults to Helper().
    """
    helper = Helper() if helper is Unset else helper
    for argument in options:
        # a switch with the same spellings was injected by an earlier call: share its flag
        if argument.variable is helper.flag or (
                argument.arity == 0 and (argument.short, argument.long) == (helper.short, helper.long)
        ):
            helper.flag = argument.variable
            break
    else:
        options.register(helper.flag, helper.short, helper.long, helper.descr)

    # only this call's argv may request help
    helper.flag.value = False
    state = options.populate(argv)
    console = _console(sink)
    prog = os.path.basename(argv[0]) if argv else None

    if not state.ok:
        console.print(render(state, colorful=helper.colorful, fancy=helper.fancy, prog=prog), soft_wrap=True)
        return True

    if not helper.requested:
        return False

    styles = _styles()
    renders = []
    if helper.usage:
        renders.append(Text(helper.usage, styles["usage-section"] if helper.colorful else ""))
    renders.append(listing(options, colorful=helper.colorful))

    renderable = Group(*renders)
    if helper.fancy:
        renderable = Panel(
            renderable,
            title=Text.assemble("[ ", ("%s HELP" % (prog or "")).strip().upper(), " ]",
                                style=styles["panel-title"] if helper.colorful else ""),
            title_align="left",
        )
    console.print(renderable, soft_wrap=True)
    return True


__all__ = (
    "Helper",
    "describe",
    "listing",
    "populate_with_help",
)
