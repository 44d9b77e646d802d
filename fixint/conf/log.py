"""Logging facilities of the package.

Package loggers are standard Python `logging
<https://docs.python.org/library/logging.html>`__ loggers, configured through
the ``logger`` registry subtree:

- ``logger/<name>/level``: messages below the level are discarded
- ``logger/<name>/<severity>``: action taken for each emitted message of the
  severity, either ``'pass'``, ``'exception'`` to raise :class:`LogException`,
  or a callable receiving the message
- ``logger/hooks``: callables invoked as ``hook(name, severity, message)`` for
  each emitted message of any package logger

Configures the ``bench`` logger to throw exception on warnings:

>>> reg['logger/bench/warning'] = 'exception'
"""

import logging
import sys
from functools import partial
from logging import INFO, WARNING

from .registry import Inject, PluginBase, inject, reg

SEVERITIES = ('critical', 'error', 'warning', 'info', 'debug')


class LogException(Exception):
    def __init__(self, message, name):
        super().__init__(message)
        self.name = name


def set_log_level(var, level, name):
    log = logging.getLogger(name)
    log.setLevel(level)
    for h in log.handlers:
        h.setLevel(level)


class LogFmtFilter(logging.Filter):
    '''Appends the location of the logging call to the records above INFO level'''
    def filter(self, record):
        if record.levelno > INFO:
            record.err_file = f'\n  File "{record.pathname}", line {record.lineno}'
        else:
            record.err_file = ''

        return True


class CustomLogger(logging.Logger):
    '''Logger that takes the configured action and runs the registry hooks for
    each message it emits'''

    fmt = '%(name)s [%(levelname)s]: %(message)s %(err_file)s'

    def make_handler(self):
        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(self.level)
        handler.setFormatter(logging.Formatter(self.fmt))
        handler.addFilter(LogFmtFilter())
        return handler

    @inject
    def run_hooks(self, severity, message, hooks=Inject('logger/hooks')):
        action = reg[f'logger/{self.name}/{severity}']
        if action == 'exception':
            raise LogException(message, self.name)

        if callable(action):
            action(message)

        for hook in hooks:
            hook(self.name, severity, message)


def _hooked(severity):
    level = getattr(logging, severity.upper())
    log_method = getattr(logging.Logger, severity)

    def method(self, msg, *args, **kwargs):
        # Report the caller of this wrapper as the origin of the record
        kwargs.setdefault('stacklevel', 2)
        log_method(self, msg, *args, **kwargs)

        if self.isEnabledFor(level):
            self.run_hooks(severity, msg)

    method.__name__ = severity
    method.__doc__ = log_method.__doc__
    return method


for _severity in SEVERITIES:
    setattr(CustomLogger, _severity, _hooked(_severity))


def typing_log():
    return logging.getLogger('typing')


def conf_log():
    return logging.getLogger('conf')


def bench_log():
    return logging.getLogger('bench')


def register_custom_log(name, level=INFO):
    '''Registers the package logger ``name`` with its default level and
    defines its ``logger/<name>`` registry subtree.

    Sets the verbosity level for the ``typing`` logger at ``DEBUG`` level:

    >>> reg['logger/typing/level'] = DEBUG
    '''
    log_cls = logging.getLoggerClass()
    logging.setLoggerClass(CustomLogger)
    logger = logging.getLogger(name)
    logging.setLoggerClass(log_cls)

    if not isinstance(logger, CustomLogger):
        raise TypeError(f'logger "{name}" was created before its registration')

    for severity in SEVERITIES:
        reg.confdef(f'logger/{name}/{severity}',
                    default='pass',
                    docs=f'Action for {severity} messages: pass, exception or a callable')

    reg.confdef(f'logger/{name}/level',
                default=level,
                docs='Messages below this level are discarded',
                setter=partial(set_log_level, name=name))

    logger.handlers.clear()
    logger.setLevel(level)
    logger.addHandler(logger.make_handler())


class LogPlugin(PluginBase):
    @classmethod
    def bind(cls):
        reg['logger/hooks'] = []

        register_custom_log('typing', WARNING)
        register_custom_log('conf', WARNING)
        register_custom_log('bench', INFO)
