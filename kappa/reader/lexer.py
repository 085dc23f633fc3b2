"""
  Lexer: characters -> tokens

- Streaming, lazy: both lexers are iterators yielding one item per request.
- Items are Token instances, or LexError instances for malformed input.
  Errors are yielded, not raised, so the caller decides whether to go on.
- Unmatched input discards the rest of the source: one error, then the end.

Two variants:

    - CharLexer:  one character of lookahead over any iterable of characters
    - RegexLexer: pattern-based, matches token shapes against an in-memory string

Token shapes:

    - ( [            -> LPAREN
    - ) ]            -> RPAREN
    - 123            -> Number (32-bit signed)
    - #t #F          -> Boolean
    - #\\a #\\space  -> Character (newline/space named, case-insensitive)
    - "a\\nb"        -> String (\\\\, \\n, \\t, \\r, \\" resolved)
    - anything else  -> identifier
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Iterator, Optional, Union

from kappa import config
from kappa.errors import LexError, Unmatched, BadEscape, InvalidLiteral
from kappa.reader.tokens import Token, LPAREN, RPAREN, identifier, literal
from kappa.types.literal import Number, Boolean, Character, String

logger = logging.getLogger(__name__)

LexResult = Union[Token, LexError]

WHITESPACE = frozenset(" \n\t\r")
OPEN = frozenset("([")
CLOSE = frozenset(")]")
# Characters that end an identifier, number or hash token
TERMINATORS = WHITESPACE | OPEN | CLOSE | {'"'}

NAMED_CHARS: dict[str, str] = {
    "newline": "\n",
    "space": " ",
}

STRING_ESCAPES: dict[str, str] = {
    "\\": "\\",
    "n": "\n",
    "t": "\t",
    "r": "\r",
    '"': '"',
}

_NUMBER_RE = re.compile(r"[0-9]+\Z")


# ----------------------
# Classification
# ----------------------

def unescape(body: str) -> str:
    """Resolve backslash escapes in the body of a string literal."""
    out: list[str] = []
    chars = iter(body)
    for ch in chars:
        if ch != "\\":
            out.append(ch)
            continue
        nxt = next(chars, "")
        if nxt not in STRING_ESCAPES:
            raise BadEscape("\\" + nxt)
        out.append(STRING_ESCAPES[nxt])
    return "".join(out)


def classify(text: str) -> Token:
    """Turn the text of one complete non-delimiter token into a Token.

    Raises a LexError subclass when the text is a malformed literal.
    """
    if _NUMBER_RE.match(text):
        # int() refuses very long digit strings; anything past 10 digits is out of range anyway
        if len(text.lstrip("0")) > 10:
            raise InvalidLiteral(text, "out of 32-bit signed range")
        # Number() enforces the 32-bit range and raises InvalidLiteral
        return literal(Number(int(text)))

    if text.startswith('"'):
        if len(text) < 2 or not text.endswith('"'):
            raise Unmatched(text)
        return literal(String(unescape(text[1:-1])))

    if text.startswith("#"):
        lowered = text.lower()
        if lowered == "#t":
            return literal(Boolean(True))
        if lowered == "#f":
            return literal(Boolean(False))
        if text.startswith("#\\"):
            name = text[2:]
            if name.lower() in NAMED_CHARS:
                return literal(Character(NAMED_CHARS[name.lower()]))
            if len(name) == 1:
                return literal(Character(name))
        raise Unmatched(text)

    return identifier(text)


# ----------------------
# Character-at-a-time lexer
# ----------------------

class CharLexer:
    """Lexer over any iterable of characters with one character of lookahead."""

    def __init__(self, chars: Iterable[str]):
        self._chars: Iterator[str] = iter(chars)
        self._peek: Optional[str] = next(self._chars, None)

    def __iter__(self) -> CharLexer:
        return self

    def _advance(self) -> Optional[str]:
        ch = self._peek
        self._peek = next(self._chars, None)
        return ch

    def _discard(self) -> None:
        self._chars = iter(())
        self._peek = None

    def _read_string(self) -> tuple[str, bool]:
        """Read a double-quoted span. Returns (raw_text, terminated)."""
        buf = [self._advance()]  # opening quote
        while True:
            ch = self._advance()
            if ch is None:
                return "".join(buf), False
            buf.append(ch)
            if ch == '"':
                return "".join(buf), True
            if ch == "\\":
                escaped = self._advance()
                if escaped is None:
                    return "".join(buf), False
                buf.append(escaped)

    def _read_atom(self) -> str:
        buf = [self._advance()]
        if buf[0] == "#" and self._peek == "\\":
            buf.append(self._advance())
            # The character after #\ belongs to the token whatever it is
            if self._peek is not None:
                buf.append(self._advance())
        while self._peek is not None and self._peek not in TERMINATORS:
            buf.append(self._advance())
        return "".join(buf)

    def __next__(self) -> LexResult:
        while self._peek in WHITESPACE:
            self._advance()

        if self._peek is None:
            raise StopIteration
        if self._peek in OPEN:
            self._advance()
            return LPAREN
        if self._peek in CLOSE:
            self._advance()
            return RPAREN

        if self._peek == '"':
            text, terminated = self._read_string()
            if not terminated:
                self._discard()
                logger.debug("unterminated string %r", text)
                return Unmatched(text)
        else:
            text = self._read_atom()

        try:
            return classify(text)
        except LexError as err:
            if isinstance(err, Unmatched):
                self._discard()
            logger.debug("lex error: %s", err)
            return err


# ----------------------
# Pattern-based lexer
# ----------------------

_WS = r" \n\t\r"
_END = r"(?=[" + _WS + r"()\[\]\"]|\Z)"

TOKEN_RE = re.compile(
    r"(?P<lparen>[(\[])"  # ( and [
    r"|(?P<rparen>[)\]])"  # ) and ]
    r'|(?P<string>"(?:\\.|[^\\"])*")'  # double-quoted strings
    r"|(?P<number>[0-9]+" + _END + r")"  # decimal integers
    r"|(?P<boolean>#[tTfF]" + _END + r")"  # #t / #f
    r"|(?P<char>#\\(?:(?i:newline|space)" + _END + r"|." + _END + r"))"  # named or single-char
    r"|(?P<identifier>[^" + _WS + r"()\[\]\"#][^" + _WS + r"()\[\]\"]*)"  # fallback: identifiers
    ,
    re.DOTALL,
)

_SKIP_RE = re.compile(r"[" + _WS + r"]*")
_UNMATCHED_RE = re.compile(r"[^" + _WS + r"()\[\]]*")


class RegexLexer:
    """Lexer matching token patterns against an in-memory string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0

    def __iter__(self) -> RegexLexer:
        return self

    def __next__(self) -> LexResult:
        self.pos = _SKIP_RE.match(self.text, self.pos).end()
        if self.pos >= len(self.text):
            raise StopIteration

        m = TOKEN_RE.match(self.text, self.pos)
        if not m:
            end = max(_UNMATCHED_RE.match(self.text, self.pos).end(), self.pos + 1)
            snippet = self.text[self.pos:end]
            self.pos = len(self.text)
            logger.debug("no token matches %r", snippet)
            return Unmatched(snippet)

        self.pos = m.end()
        if m.lastgroup == "lparen":
            return LPAREN
        if m.lastgroup == "rparen":
            return RPAREN
        try:
            return classify(m.group())
        except LexError as err:
            logger.debug("lex error: %s", err)
            return err


def make_lexer(source: Union[str, Iterable[str]], kind: Optional[str] = None) -> Union[CharLexer, RegexLexer]:
    """Build the lexer variant named by ``kind`` (default: KAPPA_LEXER)."""
    kind = kind or config.get_lexer_kind()
    if kind == "char":
        return CharLexer(source)
    if kind == "regex":
        text = source if isinstance(source, str) else "".join(source)
        return RegexLexer(text)
    raise ValueError(f"unknown lexer kind {kind!r}")


def lex(source: Union[str, Iterable[str]], kind: Optional[str] = None) -> Iterator[LexResult]:
    """Token generator: yields Token or LexError items."""
    return make_lexer(source, kind)
