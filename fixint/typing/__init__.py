from .base import TemplateArgumentsError, typeof
from .uint import Uint
from .math import bitw, ceil_div, nlimbs
from .approx import (approx_log, approx_log2, approx_log10, approx_pow2, checked_log,
                     checked_log2, most_significant_bits)
from .root import root, root_steps, RootStep, RootSeedError

__all__ = [
    'TemplateArgumentsError', 'typeof', 'Uint', 'bitw', 'ceil_div', 'nlimbs',
    'approx_log', 'approx_log2', 'approx_log10', 'approx_pow2', 'checked_log', 'checked_log2',
    'most_significant_bits', 'root', 'root_steps', 'RootStep', 'RootSeedError'
]
