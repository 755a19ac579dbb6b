"""
KZG 성능 측정
==============

다섯 단계(setup, create_polynomial, commit, open_many, verify_many)의
실행 시간을 time.perf_counter로 측정한다.

실행:
    python -m pcs.kzg.benchmark

순수 파이썬 BLS12-381 연산이므로 차수를 크게 잡으면 오래 걸린다.
"""

import statistics
import time

from pcs.kzg.cli import create_polynomial
from pcs.kzg.commitment import commit
from pcs.kzg.field import random_scalar
from pcs.kzg.prover import open_many
from pcs.kzg.srs import SRS
from pcs.kzg.verifier import verify_many

PHASES = ("setup", "create_polynomial", "commit", "open_many", "verify_many")


def measure_time(func, *args, num_runs=3, **kwargs):
    """함수 실행 시간의 평균과 표준편차(초)를 측정한다.

    Returns:
        (평균 시간, 표준편차, 마지막 실행 결과)
    """
    times = []
    result = None
    for _ in range(num_runs):
        start = time.perf_counter()
        result = func(*args, **kwargs)
        times.append(time.perf_counter() - start)
    stdev = statistics.stdev(times) if len(times) > 1 else 0.0
    return statistics.mean(times), stdev, result


def run_benchmarks(max_degree=16, num_runs=3, num_points=3, rng=None):
    """모든 단계를 측정하고 {단계: {"mean": s, "stdev": s}}를 반환한다."""
    results = {}

    mean, stdev, srs = measure_time(SRS.generate, max_degree, rng=rng, num_runs=num_runs)
    results["setup"] = {"mean": mean, "stdev": stdev}

    mean, stdev, polynomial = measure_time(create_polynomial, max_degree, num_runs=num_runs)
    results["create_polynomial"] = {"mean": mean, "stdev": stdev}

    mean, stdev, commitment = measure_time(commit, srs.g1_powers, polynomial,
                                           num_runs=num_runs)
    results["commit"] = {"mean": mean, "stdev": stdev}

    points = [random_scalar(rng) for _ in range(num_points)]
    mean, stdev, (ys, proofs) = measure_time(open_many, srs.g1_powers, polynomial, points,
                                             num_runs=num_runs)
    results["open_many"] = {"mean": mean, "stdev": stdev}

    mean, stdev, ok = measure_time(verify_many, commitment, proofs, points, ys,
                                   srs.g2_powers, num_runs=num_runs)
    if not ok:
        raise RuntimeError("벤치마크 중 검증 실패")
    results["verify_many"] = {"mean": mean, "stdev": stdev}

    return results


def main(max_degree=16, num_runs=3):
    print("=" * 60)
    print(f"  KZG Benchmark (max_degree={max_degree}, runs={num_runs})")
    print("=" * 60)
    results = run_benchmarks(max_degree=max_degree, num_runs=num_runs)
    for phase in PHASES:
        r = results[phase]
        print(f"  {phase:<20} {r['mean'] * 1000:>10.2f} ms  ± {r['stdev'] * 1000:.2f}")
    print("=" * 60)
    return results


if __name__ == "__main__":
    main()
