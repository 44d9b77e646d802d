"""Micro-benchmark of :func:`fixint.typing.root`.

Each case draws random operands of a given width from a seeded generator and
times the root of all of them for a given degree. Cases run under a timeout,
so that a pathological input shows up as :class:`BenchTimeout` instead of
hanging the benchmark.

Default parameters of the benchmark live in the ``bench`` registry subtree.
"""

import contextlib
import random
import time

import attr
import stopit

from fixint.conf import Inject, PluginBase, bench_log, inject, reg
from fixint.typing import Uint, root_steps


class BenchTimeout(Exception):
    pass


@attr.s(auto_attribs=True, frozen=True)
class BenchResult:
    width: int
    degree: int
    samples: int
    total: float
    max_iterations: int

    @property
    def name(self):
        return f'root/{self.degree}/{self.width}'

    @property
    def mean(self):
        if not self.samples:
            return 0.0

        return self.total / self.samples


def random_operands(width, samples, seed):
    rng = random.Random(seed)
    dtype = Uint[width]
    return [dtype(rng.getrandbits(width)) for _ in range(samples)]


@inject
def bench_root(width,
               degree,
               samples=Inject('bench/samples'),
               seed=Inject('bench/seed'),
               timeout=Inject('bench/timeout')):
    operands = random_operands(width, samples, seed)
    max_iterations = 0

    try:
        with contextlib.ExitStack() as stack:
            if timeout:
                stack.enter_context(stopit.ThreadingTimeout(timeout, swallow_exc=False))

            start = time.perf_counter()
            for value in operands:
                for step in root_steps(value, degree):
                    pass

                max_iterations = max(max_iterations, step.index)

            total = time.perf_counter() - start

    except stopit.TimeoutException:
        raise BenchTimeout(f'Benchmark case root/{degree}/{width} took longer than {timeout}s') from None

    return BenchResult(width=width,
                       degree=degree,
                       samples=samples,
                       total=total,
                       max_iterations=max_iterations)


@inject
def bench(widths=Inject('bench/widths'),
          degrees=Inject('bench/degrees'),
          samples=Inject('bench/samples'),
          seed=Inject('bench/seed'),
          timeout=Inject('bench/timeout')):
    """Runs the benchmark for all combinations of widths and degrees."""
    log = bench_log()

    results = []
    for width in widths:
        for degree in degrees:
            res = bench_root(width, degree, samples=samples, seed=seed, timeout=timeout)
            log.info(f'{res.name}: {res.mean * 1e6:.2f}us per root, '
                     f'at most {res.max_iterations} iterations')
            results.append(res)

    return results


def format_results(results):
    rows = [('case', 'samples', 'mean [us]', 'max iter')]
    for res in results:
        rows.append((res.name, str(res.samples), f'{res.mean * 1e6:.3f}', str(res.max_iterations)))

    col_widths = [max(len(r[i]) for r in rows) for i in range(len(rows[0]))]

    lines = []
    for row in rows:
        lines.append('  '.join(c.rjust(w) if i else c.ljust(w)
                               for i, (c, w) in enumerate(zip(row, col_widths))))

    return '\n'.join(lines)


class BenchPlugin(PluginBase):
    @classmethod
    def bind(cls):
        reg.confdef('bench/widths',
                    default=[64, 128, 256, 1024],
                    docs='Bit widths of the benchmarked operands')
        reg.confdef('bench/degrees',
                    default=[2, 3, 5, 1073741824],
                    docs='Degrees of the benchmarked roots')
        reg.confdef('bench/samples',
                    default=200,
                    docs='Number of random operands per benchmark case')
        reg.confdef('bench/seed', default=0, docs='Seed of the operand generator')
        reg.confdef('bench/timeout',
                    default=10.0,
                    docs='Timeout in seconds for a single benchmark case, 0 to disable')
