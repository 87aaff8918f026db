import pytest

from refmodel.errors import NotFound, ParseError, TypeMismatch, UndefinedRead, UnsupportedConstruct
from refmodel.ast import BinaryOp, Ident, Literal
from refmodel.values import UNDEFINED, UNIT, Lit, Ref, to_string


def test_to_string():
    assert to_string(Lit('42')) == '42'
    assert to_string(Lit('0b1010')) == '0b1010'
    assert to_string(Ref('a')) == '&a'
    assert to_string(UNIT) == '()'
    assert to_string(UNDEFINED) == 'undefined'


def test_to_string_rejects_non_values():
    with pytest.raises(TypeError):
        to_string(42)


def test_values_are_compared_structurally():
    assert Ref('a') == Ref('a')
    assert Ref('a') != Ref('b')
    assert Lit('1') != Lit('01')


def test_error_messages():
    assert str(NotFound('a')) == 'NotFound: cannot find place: a'
    assert str(UndefinedRead('a')) == 'UndefinedRead: attempting to read undefined place: a'
    assert str(TypeMismatch(Lit('1'))) == 'TypeMismatch: cannot dereference a non-reference value: Lit(1)'
    node = BinaryOp('+', Ident('a'), Literal('1'))
    err = UnsupportedConstruct(node)
    assert str(err) == 'UnsupportedConstruct: unsupported expression: BinaryOp'
    assert err.node is node


def test_parse_error_position():
    err = ParseError("unexpected token ';'", 2, 9)
    assert err.message == "line 2, column 9: unexpected token ';'"
    assert ParseError('unexpected end of input', -1, -1).message == 'unexpected end of input'
