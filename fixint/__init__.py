import sys
from importlib.metadata import version

if sys.version_info < (3, 9):
    raise Exception("Must be using Python 3.9 and above")

__version__ = version("fixint")

from fixint.conf import PluginBase, clear, reg
import fixint.conf

import fixint.typing
from fixint.typing import Uint, root

import fixint.bench

from fixint.conf.custom_settings import load_rc
load_rc('.fixint')

__all__ = ['reg', 'clear', 'PluginBase', 'Uint', 'root']
