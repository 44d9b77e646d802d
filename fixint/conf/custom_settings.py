import json
import os
import runpy
import sys

from .log import conf_log
from .registry import reg
from .utils import dict_generator


def load_yaml(rc_path):
    try:
        import yaml
    except ImportError:
        conf_log().warning(f'YAML configuration file found at "{rc_path}", but yaml '
                           f'python package not installed')
        return None

    with open(rc_path) as f:
        return yaml.safe_load(f)


def load_json(rc_path):
    with open(rc_path) as f:
        return json.load(f)


def load_rc_from_dir(rc_fn, dirname):
    '''Applies the ``rc_fn`` settings file found in ``dirname``. A Python
    file is executed and takes precedence, otherwise a JSON file takes
    precedence over a YAML one.'''
    rc_path = os.path.join(dirname, f'{rc_fn}.py')
    if os.path.exists(rc_path):
        conf_log().debug(f'Loading settings from "{rc_path}"')
        runpy.run_path(rc_path)
        return

    for ext, loader in (('json', load_json), ('yaml', load_yaml)):
        rc_path = os.path.join(dirname, f'{rc_fn}.{ext}')
        if not os.path.exists(rc_path):
            continue

        conf = loader(rc_path)
        if not conf:
            continue

        conf_log().debug(f'Loading settings from "{rc_path}"')
        for *keys, val in dict_generator(conf):
            reg['/'.join(str(k) for k in keys)] = val

        return


def search_dirs(dirname):
    '''Yields ``dirname`` and its parents, followed by the home directory and
    ``~/.fixint``, without repetitions.'''
    dirname = os.path.abspath(dirname)
    root = os.path.abspath(os.sep)
    while dirname != root:
        yield dirname
        dirname = os.path.dirname(dirname)

    home_path = os.path.expanduser("~")
    yield home_path
    yield os.path.join(home_path, '.fixint')


def load_rc(rc_fn, dirname=None):
    '''Loads the settings files named ``rc_fn`` (with .py, .json or .yaml
    extension) from ``dirname`` and all of its parents, the home directory and
    ``~/.fixint``. Settings found closer to ``dirname`` take precedence.'''
    if dirname is None:
        main = sys.modules['__main__']
        if hasattr(main, '__file__'):
            dirname = os.path.dirname(os.path.abspath(main.__file__))
        else:
            dirname = os.getcwd()

    for path in reversed(list(dict.fromkeys(search_dirs(dirname)))):
        load_rc_from_dir(rc_fn, path)
