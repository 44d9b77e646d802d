import pytest
from fixint import clear, reg
from fixint.conf import Registry, RegistryException


def test_basic():
    clear()

    reg['a/b'] = 1

    reg['a/c'] = 3
    reg['a/b'] = 2

    reg['d'] = 4

    assert reg['a/b'] == 2
    assert reg['a/c'] == 3
    assert reg['d'] == 4
    assert 'a/c' in reg
    assert 'a/e' not in reg

    clear()


def test_missing_path():
    clear()

    reg['d'] = 4

    assert 'x/y' not in reg
    assert 'd/y' not in reg

    with pytest.raises(KeyError):
        reg['x/y']

    with pytest.raises(KeyError):
        reg['d/y'] = 1

    clear()


def test_conf_setter():
    clear()

    values = []

    def set_b(var, val):
        if val is None:
            return

        values.append(val)

    reg.confdef('a/b', setter=set_b)

    reg['a/b'] = 1
    reg['a/b'] = 2

    assert values == [1, 2]
    assert reg['a/b'] == 2

    clear()


def test_confdef_twice():
    clear()

    reg.confdef('a/b', default=1)

    with pytest.raises(RegistryException):
        reg.confdef('a/b', default=2)

    clear()


def test_confdef_default():
    clear()

    var = reg.confdef('a/b/c', default=3, docs='three')

    assert isinstance(reg['a/b'], Registry)
    assert reg['a/b/c'] == 3
    assert var.docs == 'three'

    reg['a/b/c'] = 4
    assert var.val == 4
    assert var.default == 3

    clear()


def test_subreg():
    clear()

    reg.subreg('a')

    a = reg['a']

    a['b'] = 1
    a['c/d'] = 2

    assert isinstance(a, Registry)
    assert reg['a/b'] == 1
    assert reg['a/c/d'] == 2

    assert reg.subreg('e', {'f': 5})['f'] == 5

    clear()


def test_docs():
    clear()

    docs = {path: (val, doc) for path, val, doc in reg.docs()}

    assert docs['bench/samples'][0] == 200
    assert docs['bench/samples'][1]
    assert 'logger/typing/level' in docs

    clear()


def test_clear_restores_defaults():
    reg['bench/samples'] = 10
    reg['x'] = 1

    clear()

    assert reg['bench/samples'] == 200
    assert 'x' not in reg
