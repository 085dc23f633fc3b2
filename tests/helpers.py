from kappa.analysis import analyze
from kappa.reader.parser import parse


def node_of(source):
    """First item the parser yields for ``source``."""
    return next(iter(parse(source)))


def expr(source):
    return analyze(node_of(source))
