class KappaError(Exception):
    """ Base class for all kappa errors"""
    pass


# ----------------------
# Lexer errors
# ----------------------

class LexError(KappaError):
    """ Raised when characters cannot be turned into a token"""
    pass


class Unmatched(LexError):
    """ Raised when no token shape fits at the current position.
    The rest of the source is discarded."""

    def __init__(self, text: str):
        super().__init__(f"no token matches {text!r}")
        self.text = text


class BadEscape(LexError):
    """ Raised for an unknown backslash escape inside a string"""

    def __init__(self, escape: str):
        super().__init__(f"invalid escape sequence {escape!r} in string")
        self.escape = escape


# ----------------------
# Structural parser errors
# ----------------------

class ParseError(KappaError):
    """ Raised when tokens do not form a balanced tree"""
    pass


class UnmatchedRightParen(ParseError):
    def __init__(self):
        super().__init__("unmatched right parenthesis")


class UnexpectedEof(ParseError):
    def __init__(self):
        super().__init__("unexpected EOF")


class LexFailure(ParseError):
    """ A lexer error seen by the parser"""

    def __init__(self, error: LexError):
        super().__init__(f"lexer error: {error}")
        self.error = error


# ----------------------
# Syntax analysis errors
# ----------------------

class SchemeError(KappaError):
    """ Raised when a node tree is not a valid expression"""
    pass


class UnexpectedNil(SchemeError):
    def __init__(self):
        super().__init__("unexpected nil: empty application")


class UnhandledKeyword(SchemeError):
    def __init__(self, name: str):
        super().__init__(f"unhandled keyword {name}")
        self.name = name


class ApplicationNotImplemented(SchemeError):
    def __init__(self):
        super().__init__("application not implemented")


class ArityMismatch(SchemeError):
    """ Raised when a special form gets the wrong number of operands"""

    def __init__(self, keyword: str, expected: int, got: int, at_least: bool = False):
        bound = f"at least {expected}" if at_least else str(expected)
        super().__init__(f"{keyword}: expected {bound}, got {got}")
        self.keyword = keyword
        self.expected = expected
        self.got = got
        self.at_least = at_least


class MalformedCondClause(SchemeError):
    """ Raised when a cond clause has the wrong shape"""
    pass


class InvalidLiteral(SchemeError, LexError):
    """ Raised when literal text does not fit its type, e.g. integer overflow"""

    def __init__(self, text: str, reason: str):
        super().__init__(f"invalid literal {text!r}: {reason}")
        self.text = text
        self.reason = reason


class NestingTooDeep(SchemeError):
    """ Raised when a form is nested deeper than the analyzer can follow"""

    def __init__(self):
        super().__init__("form nested too deeply")
