"""
Option spelling matcher.

match() decides whether a token fragment (the token with its leading '-' or
'--' stripped) names an option spelling, and where an embedded value starts.

Rules
- Both fragment and spelling None: match, no embedded value (this is how the
  positional consumer recognizes itself).
- Exactly one of them None: no match.
- Characters are compared up to `limit`; a spelling that is not fully consumed
  within `limit` characters never matches.
- Spelling consumed and nothing left: match, no embedded value.
- Something left over:
  • short mode: prefix match; one leading delimiter is skipped, the rest is the
    embedded value ("-w5", "-w=5", "-w:5" all embed "5").
  • long mode: the leftover must start with a delimiter, the embedded value is
    what follows it ("--w=5"); "--wx" does not match "w".

Examples
    >>> match("w5", "w", True, delimiters="=:", limit=64)
    (True, '5')
    >>> match("outfile=foo", "outfile", False, delimiters="=:", limit=64)
    (True, 'foo')
    >>> match("outfilefoo", "outfile", False, delimiters="=:", limit=64)
    (False, None)
"""

MISS = (False, None)
HIT = (True, None)

DEFAULT_DELIMITERS = "=:"
DEFAULT_LIMIT = 64


def match(fragment, spelling, short, *, delimiters=DEFAULT_DELIMITERS, limit=DEFAULT_LIMIT):
    """
    Match a token fragment against one option spelling.

    Parameters
    - fragment: str | None
      token text after the leading dashes.
    - spelling: str | None
      the registered short (short mode) or long (long mode) spelling.
    - short: bool
      short mode (prefix match, optional delimiter) versus long mode.
    - delimiters: Container[str]
      characters separating a spelling from an embedded value.
    - limit: int
      maximum number of characters compared.

    Returns
    - (matched, embedded): embedded is the value text or None.
    """
    if fragment is None and spelling is None:
        return HIT
    if fragment is None or spelling is None:
        return MISS

    width = min(len(fragment), len(spelling), limit)
    if fragment[:width] != spelling[:width] or len(spelling) > width:
        return MISS

    if not (rest := fragment[width:]):
        return HIT

    if short:
        if rest[0] in delimiters:
            rest = rest[1:]
        return True, rest

    if rest[0] in delimiters:
        return True, rest[1:]

    return MISS


def normalize_delimiters(delimiters, /):
    """
    Turn a delimiter specification into a frozenset of single characters.

    The null character disables delimiters altogether (it can never appear in a
    command-line token); an empty specification does the same.
    """
    if isinstance(delimiters, str):
        delimiters = tuple(delimiters)
    characters = set()
    for delimiter in delimiters:
        if not isinstance(delimiter, str) or len(delimiter) != 1:
            raise ValueError("delimiters must be single characters")
        characters.add(delimiter)
    characters.discard("\0")
    return frozenset(characters)


__all__ = (
    "match",
    "normalize_delimiters",
    "DEFAULT_DELIMITERS",
    "DEFAULT_LIMIT",
)
