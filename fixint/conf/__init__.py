from .log import (register_custom_log, CustomLogger, LogException, LogFmtFilter, conf_log,
                  bench_log, set_log_level, typing_log)
from .registry import PluginBase, clear, inject, Inject, reg, Registry, RegistryException

__all__ = [
    'PluginBase', 'reg', 'clear', 'typing_log', 'conf_log', 'bench_log', 'CustomLogger',
    'LogException', 'LogFmtFilter', 'set_log_level', 'inject', 'Inject', 'register_custom_log',
    'Registry', 'RegistryException'
]
