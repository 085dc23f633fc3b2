from __future__ import annotations
import logging
import os


LEXER_KINDS = ('char', 'regex')

# Defaults
_DEFAULT_LEXER = 'char'
_DEFAULT_LOG_LEVEL = 'WARNING'


def value_from_env(var: str, default: str) -> str:
    raw = os.environ.get(var)
    if not raw or not raw.strip():
        return default
    return raw.strip()


def get_lexer_kind() -> str:
    kind = value_from_env('KAPPA_LEXER', _DEFAULT_LEXER).lower()
    if kind not in LEXER_KINDS:
        raise ValueError(f"KAPPA_LEXER must be one of {', '.join(LEXER_KINDS)}, got {kind!r}")
    return kind


def get_log_level() -> int:
    name = value_from_env('KAPPA_LOG_LEVEL', _DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(name)
    # getLevelName maps unknown names to "Level <name>"
    if not isinstance(level, int):
        raise ValueError(f"KAPPA_LOG_LEVEL is not a logging level: {name!r}")
    return level
