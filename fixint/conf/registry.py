"""Hierarchical registry that holds the configuration of the package.

Registry entries are addressed by slash separated paths:

>>> reg['bench/samples'] = 100
>>> reg['bench']['samples']
100

Configuration variables are defined with :meth:`Registry.confdef`, which
attaches a default value, documentation and an optional setter callback
invoked on each assignment.
"""

from dataclasses import dataclass, field
from typing import Any, Callable

from .utils import intercept_arguments

delimiter = '/'


class RegistryException(Exception):
    pass


@dataclass
class Inject:
    path: str


def inject(func):
    """Resolves the arguments of ``func`` that are left at their
    ``Inject('path')`` defaults from the registry at each call.

    >>> @inject
    ... def samples(num=Inject('bench/samples')):
    ...     return num
    """
    def resolve(arguments):
        for name, val in arguments.items():
            if isinstance(val, Inject):
                arguments[name] = reg[val.path]

    return intercept_arguments(func, resolve)


class PluginBase:
    """Subclasses get their :meth:`bind` called as soon as they are defined and
    each time the registry is cleared, so that they can populate the registry
    with their defaults."""
    subclasses = []

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.subclasses.append(cls)
        cls.bind()

    @classmethod
    def bind(cls):
        pass


def clear():
    """Resets the registry to the defaults of all the plugins."""
    reg.clear()

    for subc in PluginBase.subclasses:
        subc.bind()


@dataclass
class ConfigVariable:
    path: str
    default: Any
    docs: str = None
    setter: Callable = None
    val: Any = field(init=False)

    def __post_init__(self):
        self.val = self.default

    def assign(self, val):
        if self.setter is not None:
            self.setter(self, val)

        self.val = val


class Registry:
    def __init__(self, *args, **kwds):
        self._dict = dict(*args, **kwds)

    def __repr__(self):
        return f'Registry({self._dict!r})'

    def _locate(self, path, create=False):
        """Returns the subregistry holding the last element of the path,
        together with the name of the element."""
        *parents, name = path.split(delimiter)

        node = self
        for p in parents:
            child = node._dict.get(p)
            if child is None and create:
                child = node._dict[p] = Registry()

            if not isinstance(child, Registry):
                raise KeyError(path)

            node = child

        return node, name

    def __getitem__(self, path):
        node, name = self._locate(path)
        val = node._dict[name]

        if isinstance(val, ConfigVariable):
            return val.val

        return val

    def __contains__(self, path):
        try:
            node, name = self._locate(path)
        except KeyError:
            return False

        return name in node._dict

    def __setitem__(self, path, val):
        node, name = self._locate(path, create=True)

        var = node._dict.get(name)
        if isinstance(var, ConfigVariable):
            var.assign(val)
        else:
            node._dict[name] = val

    def clear(self):
        self._dict.clear()

    def confdef(self, path, default=None, docs=None, setter=None):
        if path in self:
            raise RegistryException(f'Variable "{path}" already defined!')

        var = ConfigVariable(path, default=default, docs=docs, setter=setter)
        if setter is not None:
            setter(var, default)

        node, name = self._locate(path, create=True)
        node._dict[name] = var

        return var

    def subreg(self, path, val=None):
        self[path] = Registry() if val is None else Registry(val)
        return self[path]

    def docs(self, prefix=''):
        """Yields (path, value, docs) for each configuration variable."""
        for key, val in self._dict.items():
            path = f'{prefix}{key}'
            if isinstance(val, ConfigVariable):
                yield path, val.val, val.docs
            elif isinstance(val, Registry):
                yield from val.docs(f'{path}{delimiter}')


reg = Registry()
