import pytest

from refmodel.environment import Environment
from refmodel.errors import NotFound, RefModelError, UndefinedRead
from refmodel.values import UNDEFINED, UNIT, Lit, Ref


def test_lookup_of_unbound_place_is_not_found():
    env = Environment()
    for place in ('a', 'b', 'x_1'):
        with pytest.raises(NotFound) as exc:
            env.lookup(place)
        assert exc.value.place == place


def test_lookup_of_undefined_is_distinct_from_not_found():
    env = Environment()
    env.insert('a', UNDEFINED)
    with pytest.raises(UndefinedRead) as exc:
        env.lookup('a')
    assert not isinstance(exc.value, NotFound)
    assert isinstance(exc.value, RefModelError)
    assert 'a' in env


def test_insert_overwrites_without_shadowing():
    env = Environment()
    env.insert('a', Lit('1'))
    env.insert('a', Lit('2'))
    assert env.lookup('a') == Lit('2')
    assert len(env) == 1


def test_bindings_is_a_copy():
    env = Environment({'a': Lit('1')})
    snapshot = env.bindings
    snapshot['b'] = Lit('2')
    assert 'b' not in env


def test_render_is_sorted_by_name():
    env = Environment()
    env.insert('b', Ref('a'))
    env.insert('a', Lit('1'))
    assert str(env) == 'a ↦ 1\nb ↦ &a\n'
    assert list(env) == ['a', 'b']


def test_render_unit_and_undefined():
    env = Environment({'x': UNDEFINED, 'u': UNIT})
    assert str(env) == 'u ↦ ()\nx ↦ undefined\n'


def test_empty_environment_renders_nothing():
    assert str(Environment()) == ''


def test_equality_compares_bindings():
    assert Environment({'a': Lit('1')}) == Environment({'a': Lit('1')})
    assert Environment({'a': Lit('1')}) != Environment({'a': Ref('a')})
