"""
KZG End-to-End Tests
=====================

전체 파이프라인(generate -> commit -> open -> verify)과 CLI, 벤치마크를 테스트한다.

테스트 범위:
  - 구체 시나리오: P(x) = 2 + 3x + 4x², z = 1, y = 9 (y = 8은 실패)
  - 완전성(completeness): 무작위 다항식/무작위 점
  - 건전성(soundness): 틀린 평가값
  - 배치 일관성: open_many + verify_many
  - 경계: max_degree = 1, 차수 == max_degree
  - CLI 종료 코드와 출력, 벤치마크 결과 형태
"""

import io
import random
import pytest

from pcs.kzg import cli
from pcs.kzg.benchmark import PHASES, run_benchmarks
from pcs.kzg.commitment import commit
from pcs.kzg.errors import InvalidDegree, MalformedInput
from pcs.kzg.field import FR, CURVE_ORDER, random_scalar
from pcs.kzg.polynomial import Polynomial
from pcs.kzg.prover import open_at, open_many
from pcs.kzg.srs import SRS
from pcs.kzg.verifier import verify, verify_many


# ─────────────────────────────────────────────────────────────────────
# 프로토콜 E2E
# ─────────────────────────────────────────────────────────────────────

class TestScenario:
    """max_degree = 2, P(x) = 2 + 3x + 4x²."""

    def test_open_at_one(self, srs_quadratic, poly_234):
        C = commit(srs_quadratic.g1_powers, poly_234)
        y, proof = open_at(srs_quadratic.g1_powers, poly_234, FR(1))
        assert y == FR(9)
        assert verify(C, proof, FR(1), FR(9), srs_quadratic.g2_powers)
        assert not verify(C, proof, FR(1), FR(8), srs_quadratic.g2_powers)


class TestProperties:
    """완전성, 건전성, 배치 일관성, 경계."""

    def test_completeness_random(self):
        rng = random.Random(2024)
        srs = SRS.generate(max_degree=4, rng=rng)
        poly = Polynomial.random(4, rng)
        z = random_scalar(rng)
        C = commit(srs.g1_powers, poly)
        y, proof = open_at(srs.g1_powers, poly, z)
        assert verify(C, proof, z, y, srs.g2_powers)

    def test_soundness_random_wrong_evaluation(self, srs_small):
        rng = random.Random(77)
        poly = Polynomial.random(5, rng)
        z = random_scalar(rng)
        C = commit(srs_small.g1_powers, poly)
        y, proof = open_at(srs_small.g1_powers, poly, z)
        wrong = y + random_scalar(rng, nonzero=True)
        assert not verify(C, proof, z, wrong, srs_small.g2_powers)

    def test_batch_consistency(self, srs_small):
        poly = cli.create_polynomial(8)
        C = commit(srs_small.g1_powers, poly)
        points = [FR(0), FR(5), FR(CURVE_ORDER - 1)]
        ys, proofs = open_many(srs_small.g1_powers, poly, points)
        assert verify_many(C, proofs, points, ys, srs_small.g2_powers)

    def test_batch_fails_when_proofs_swapped(self, srs_small):
        poly = Polynomial([FR(2), FR(3), FR(4)])
        C = commit(srs_small.g1_powers, poly)
        points = [FR(1), FR(2)]
        ys, proofs = open_many(srs_small.g1_powers, poly, points)
        assert not verify_many(C, proofs[::-1], points, ys, srs_small.g2_powers)

    def test_boundary_max_degree_one(self):
        srs = SRS.generate(max_degree=1, seed=5)
        poly = Polynomial([FR(3), FR(11)])
        C = commit(srs.g1_powers, poly)
        y, proof = open_at(srs.g1_powers, poly, FR(4))
        assert y == FR(47)
        assert verify(C, proof, FR(4), y, srs.g2_powers)

    def test_degree_equal_to_max_degree(self, srs_small):
        poly = Polynomial.random(8, random.Random(3))
        assert poly.degree == srs_small.max_degree
        C = commit(srs_small.g1_powers, poly)
        y, proof = open_at(srs_small.g1_powers, poly, FR(10))
        assert verify(C, proof, FR(10), y, srs_small.g2_powers)


# ─────────────────────────────────────────────────────────────────────
# CLI
# ─────────────────────────────────────────────────────────────────────

class TestCLI:
    """pcs.kzg.cli 테스트."""

    def test_parse_degree(self):
        assert cli.parse_degree(" 8\n") == 8

    @pytest.mark.parametrize("text", ["abc\n", "", "1.5\n"])
    def test_parse_degree_malformed(self, text):
        with pytest.raises(MalformedInput):
            cli.parse_degree(text)

    @pytest.mark.parametrize("text", ["0\n", "-3\n", "1000001\n"])
    def test_parse_degree_invalid(self, text):
        with pytest.raises(InvalidDegree):
            cli.parse_degree(text)

    def test_create_polynomial_fixed_coeffs(self):
        poly = cli.create_polynomial(3)
        assert poly.coeffs == [FR(2), FR(3), FR(4), FR(5)]

    def test_create_polynomial_random(self):
        poly = cli.create_polynomial(3, random_coeffs=True, rng=random.Random(1))
        assert poly.degree == 3

    def test_random_points_count(self):
        rng = random.Random(11)
        for _ in range(20):
            assert 1 <= len(cli.random_points(rng)) <= 3

    def test_main_success(self):
        out = io.StringIO()
        code = cli.main(stdin=io.StringIO("2\n"), stdout=out, rng=random.Random(8))
        assert code == 0
        assert cli.PROMPT in out.getvalue()
        assert cli.SUCCESS_LINE in out.getvalue()

    def test_main_failure_exit_code(self, monkeypatch):
        monkeypatch.setattr(cli, "verify_many", lambda *args: False)
        out = io.StringIO()
        code = cli.main(stdin=io.StringIO("1\n"), stdout=out, rng=random.Random(8))
        assert code == 1
        assert cli.FAILURE_LINE in out.getvalue()

    @pytest.mark.parametrize("text,kind", [("abc\n", "MalformedInput"), ("0\n", "InvalidDegree")])
    def test_main_input_error(self, text, kind):
        out = io.StringIO()
        code = cli.main(stdin=io.StringIO(text), stdout=out)
        assert code == 2
        assert kind in out.getvalue()


# ─────────────────────────────────────────────────────────────────────
# Benchmark
# ─────────────────────────────────────────────────────────────────────

class TestBenchmark:
    """pcs.kzg.benchmark 테스트."""

    def test_run_benchmarks_shape(self):
        results = run_benchmarks(max_degree=2, num_runs=1, num_points=1,
                                 rng=random.Random(4))
        assert set(results) == set(PHASES)
        for phase in PHASES:
            assert results[phase]["mean"] >= 0
            assert results[phase]["stdev"] == 0.0
