import argparse
import sys

from fixint import PluginBase, __version__, reg
from fixint.conf import Inject, inject


@inject
def main(argv=None, config=Inject('entry')):
    if argv is None:
        argv = sys.argv

    args = config['parser'].parse_args(argv[1:])

    if args.command is None:
        config['parser'].print_help()
        return 1

    kwds = vars(args)
    cmd = kwds.pop('command')

    return config['cmds'][cmd]['entry'](**kwds)


@inject
def cmd_register(name, cmd_entry, aliases=(), help=None, tree=Inject('entry')):
    cmd_config = tree['cmds'].subreg(name)
    cmd_config['parser'] = tree['subparsers'].add_parser(name, aliases=aliases, help=help)
    cmd_config['entry'] = cmd_entry

    return cmd_config


def parse_uint(text):
    try:
        val = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{text}'") from None

    if val < 0:
        raise argparse.ArgumentTypeError(f"value must be non-negative: '{text}'")

    return val


def parse_degree(text):
    val = parse_uint(text)
    if val == 0:
        raise argparse.ArgumentTypeError("degree must be greater than zero")

    return val


def root_entry(value, degree, bits):
    from fixint.typing import Uint

    if bits is None:
        dtype = Uint
    else:
        dtype = Uint[bits]

    try:
        value = dtype(value)
    except ValueError as e:
        reg['entry/parser'].error(str(e))

    print(int(value.root(degree)))
    return 0


def bench_entry(bits, degrees, samples, seed, timeout):
    from fixint.bench import bench, format_results

    kwds = {'widths': bits, 'degrees': degrees, 'samples': samples, 'seed': seed, 'timeout': timeout}
    kwds = {k: v for k, v in kwds.items() if v is not None}

    print(format_results(bench(**kwds)))
    return 0


def config_entry():
    for path, val, docs in reg.docs():
        line = f'{path} = {val!r}'
        if docs:
            line += f'  # {docs}'

        print(line)

    return 0


class EntryPlugin(PluginBase):
    @classmethod
    def bind(cls):
        parser = argparse.ArgumentParser(
            prog='fixint', description='Roots of fixed width unsigned integers')
        parser.add_argument('--version', action='version', version=f'fixint {__version__}')

        subparsers = parser.add_subparsers(title='subcommands', help='subcommand help', dest='command')

        reg.subreg('entry', {'parser': parser, 'subparsers': subparsers})
        reg['entry'].subreg('cmds')

        conf = cmd_register('root', root_entry, help='floor of the integer root of a value')
        conf['parser'].add_argument('value', type=parse_uint, help='decimal or 0x prefixed hex value')
        conf['parser'].add_argument('degree', type=parse_degree, help='degree of the root')
        conf['parser'].add_argument(
            '--bits', type=parse_uint, default=None, help='bit width of the value (default: minimal)')

        conf = cmd_register('bench', bench_entry, help='benchmark the root computation')
        conf['parser'].add_argument('--bits', type=parse_uint, nargs='+', default=None,
                                    help='bit widths of the operands')
        conf['parser'].add_argument('--degrees', type=parse_degree, nargs='+', default=None,
                                    help='degrees of the roots')
        conf['parser'].add_argument('--samples', type=int, default=None,
                                    help='number of operands per case')
        conf['parser'].add_argument('--seed', type=int, default=None, help='operand generator seed')
        conf['parser'].add_argument('--timeout', type=float, default=None,
                                    help='timeout per case in seconds, 0 to disable')

        cmd_register('config', config_entry, help='list the configuration variables')
