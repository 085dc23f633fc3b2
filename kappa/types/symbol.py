from __future__ import annotations
import weakref


class Symbol:
    """Identifier text. Used both for identifier nodes and quoted symbols.

    Symbols are interned: every Symbol with the same name is the same object,
    so keyword lookups in the special-form registry compare by identity first.
    Symbols are immutable.
    """

    __slots__ = ("name", "__weakref__")

    _table: weakref.WeakValueDictionary = weakref.WeakValueDictionary()

    def __new__(cls, name: str) -> Symbol:
        if not isinstance(name, str) or not name:
            raise ValueError(f"invalid identifier {name!r}")
        sym = cls._table.get(name)
        if sym is None:
            sym = super().__new__(cls)
            object.__setattr__(sym, "name", name)
            cls._table[name] = sym
        return sym

    def __setattr__(self, key, value):
        raise AttributeError("Symbol is immutable")

    def __reduce__(self):
        return Symbol, (self.name,)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Symbol) and self.name == other.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self):
        return f"Symbol({self.name!r})"

    def __str__(self):
        return self.name
