import copyreg
import functools
import operator


class TemplateArgumentsError(Exception):
    pass


def pickle_c(c):
    if c.is_generic():
        return c.__name__

    return operator.getitem, (c.base, c.args[0])


class class_and_instance_method:
    def __init__(self, func):
        self.func = func
        self.__doc__ = func.__doc__

    def __get__(self, instance, cls=None):
        if instance is None:
            # return the metaclass method, bound to the class
            type_ = type(cls)
            return getattr(type_, self.func.__name__).__get__(cls, type_)
        return self.func.__get__(instance, cls)


class GenericMeta(type):
    """Base class for the types with a single generic parameter.

    Indexing the generic type with the parameter value creates the concrete
    subclass. Concrete classes are cached, so the same parameter value always
    yields the same class:

    >>> Uint[16] is Uint[16]
    True
    """
    __args__ = ()

    def __init_subclass__(cls, **kwds):
        copyreg.pickle(cls, pickle_c)

    def check_param(self, param):
        """Validates and normalizes the generic parameter value"""
        return param

    def __getitem__(self, param):
        if not self.is_generic():
            raise TemplateArgumentsError(
                f"Too many arguments to the templated type: {self!r}")

        return self.specialize(self.check_param(param))

    @functools.lru_cache(maxsize=None)
    def specialize(self, param):
        namespace = {
            '__args__': (param, ),
            '__module__': self.__module__,
            '__qualname__': self.__qualname__,
            '__doc__': self.__doc__,
        }

        return type(self)(self.__name__, (self, ), namespace)

    def is_generic(self):
        """Return True if no value has been supplied for the generic parameter.

        >>> Uint.is_generic()
        True

        >>> Uint[16].is_generic()
        False
        """
        return not self.__args__

    @property
    def base(self):
        """Returns base generic class of the type.

        >>> assert Uint[16].base == Uint
        """
        if self.is_generic():
            return self

        return self.__bases__[0]

    @property
    def args(self):
        """Returns the value supplied for the generic parameter as a tuple.

        >>> Uint[16].args
        (16,)
        """
        return self.__args__

    def __repr__(self):
        if self.is_generic():
            return self.__name__

        return f'{self.__name__}[{self.__args__[0]!r}]'


def typeof(obj, t):
    """Check if a specific type instance is a subclass of the type.

    Args:
       obj: Concrete type instance
       t: Base type class

    """
    try:
        return issubclass(obj, t)
    except TypeError:
        return False
