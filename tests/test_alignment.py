from packfmt.alignment import padding
from packfmt.core import Context
from packfmt.directives import Directive


INT = Directive('i', 4, argument=4)


def test_aligned_to_size():
    context = Context(align=8)

    assert padding(0, context, INT) == 0
    assert padding(1, context, INT) == 3
    assert padding(5, context, Directive('h', 2)) == 1
    assert padding(8, context, Directive('d', 8)) == 0
    assert padding(9, context, Directive('d', 8)) == 7


def test_ceiling():
    assert padding(3, Context(align=1), INT) == 0
    assert padding(3, Context(align=2), INT) == 1
    assert padding(9, Context(align=4), Directive('d', 8)) == 3


def test_never_aligned():
    context = Context(align=8)

    assert padding(3, context, Directive('c', 4, argument=4)) == 0
    assert padding(3, context, Directive('s', 0)) == 0
    assert padding(3, context, Directive('>', 0)) == 0


def test_explicit_size():
    assert padding(1, Context(align=8), INT, size=2) == 1
