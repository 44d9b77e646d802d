import inspect
from functools import wraps


def dict_generator(indict, pre=None):
    '''Yields a [key, subkey, ..., value] list for each leaf of the nested
    dictionary'''
    pre = pre[:] if pre else []
    if isinstance(indict, dict):
        for key, value in indict.items():
            if isinstance(value, dict):
                yield from dict_generator(value, pre + [key])
            else:
                yield pre + [key, value]
    else:
        yield pre + [indict]


def intercept_arguments(func, cb):
    '''Wraps func so that ``cb`` receives the dictionary of its arguments, with
    the defaults filled in, and can modify it right before each call.'''
    sig = inspect.signature(func)

    @wraps(func)
    def wrapper(*args, **kwargs):
        bound = sig.bind(*args, **kwargs)
        bound.apply_defaults()
        cb(bound.arguments)

        return func(*bound.args, **bound.kwargs)

    return wrapper
