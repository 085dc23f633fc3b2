from __future__ import annotations


class NilType:
    """The empty list that terminates every quoted cons chain."""

    __slots__ = ()

    def __repr__(self): return "Nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)

    def __iter__(self):
        return iter(())


Nil = NilType()
