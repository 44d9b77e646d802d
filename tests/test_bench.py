import time

import pytest
from fixint import clear, reg
from fixint.bench import BenchResult, BenchTimeout, bench, bench_root, format_results, random_operands
from fixint.typing import RootStep, Uint


def test_random_operands():
    ops = random_operands(64, 5, seed=1)

    assert len(ops) == 5
    assert all(isinstance(op, Uint[64]) for op in ops)
    assert ops == random_operands(64, 5, seed=1)
    assert ops != random_operands(64, 5, seed=2)

    assert random_operands(0, 3, seed=0) == [0, 0, 0]


def test_bench_root():
    clear()

    res = bench_root(64, 2, samples=10, seed=1, timeout=0)

    assert isinstance(res, BenchResult)
    assert res.name == 'root/2/64'
    assert res.samples == 10
    assert res.total >= 0
    assert res.max_iterations >= 1


def test_bench_root_trivial():
    clear()

    res = bench_root(8, 100, samples=10, seed=1, timeout=0)

    assert res.max_iterations == 0


def test_bench_root_defaults():
    clear()

    reg['bench/samples'] = 3
    res = bench_root(128, 3)

    assert res.samples == 3

    clear()


def test_bench():
    clear()

    results = bench(widths=[8, 16], degrees=[2, 100], samples=5)

    assert [r.name for r in results] == ['root/2/8', 'root/100/8', 'root/2/16', 'root/100/16']

    clear()


def test_bench_timeout(monkeypatch):
    clear()

    def slow_root_steps(value, degree):
        for _ in range(1000):
            time.sleep(0.01)

        yield RootStep(0, value)

    monkeypatch.setattr('fixint.bench.root_steps', slow_root_steps)

    with pytest.raises(BenchTimeout):
        bench_root(64, 2, samples=1, timeout=0.1)


def test_format_results():
    results = [
        BenchResult(width=64, degree=2, samples=10, total=1e-3, max_iterations=4),
        BenchResult(width=256, degree=1073741824, samples=10, total=2e-4, max_iterations=0),
    ]

    lines = format_results(results).splitlines()

    assert len(lines) == 3
    assert lines[0].startswith('case')
    assert lines[1].startswith('root/2/64')
    assert '100.000' in lines[1]
    assert lines[2].startswith('root/1073741824/256')
    assert '20.000' in lines[2]


def test_mean_no_samples():
    assert BenchResult(width=8, degree=2, samples=0, total=0.0, max_iterations=0).mean == 0.0
