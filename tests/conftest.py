import pytest

# This test configuration runs every test twice:
# 1) with the character-at-a-time lexer (CharLexer) ["char"]
# 2) with the pattern-based lexer (RegexLexer) ["regex"]
# The pipeline picks its lexer from KAPPA_LEXER when none is given, so the
# autouse fixture below switches every test without changing test files.


@pytest.fixture(params=["char", "regex"])
def lexer_kind(request):
    return request.param


@pytest.fixture(autouse=True)
def _force_lexer_kind(lexer_kind, monkeypatch):
    monkeypatch.setenv("KAPPA_LEXER", lexer_kind)
