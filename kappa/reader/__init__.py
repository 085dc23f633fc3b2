from kappa.reader.tokens import Token, LPAREN, RPAREN
from kappa.reader.lexer import CharLexer, RegexLexer, lex, make_lexer
from kappa.reader.parser import Parser, parse
