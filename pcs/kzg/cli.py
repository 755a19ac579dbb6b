"""
KZG E2E 데모: 표준 입력으로 최대 차수를 받아 전체 흐름을 실행한다
====================================================================

실행:
    python -m pcs.kzg.cli
    echo 8 | kzg-demo

흐름:
    1. 최대 차수 입력 (정수, 1 이상)
    2. 데모 다항식 생성 (cᵢ = i + 2)
    3. SRS 생성 (trusted setup)
    4. 커밋
    5. 무작위 1~3개 점에서 열기 증명
    6. 배치 검증

종료 코드:
    0  모든 평가값 검증 성공
    1  일부 평가값 검증 실패
    2  입력 오류 (MalformedInput, InvalidDegree)
"""

import logging
import secrets
import sys

from pcs.kzg import config
from pcs.kzg.commitment import commit
from pcs.kzg.errors import KZGError, MalformedInput
from pcs.kzg.field import FR, random_scalar
from pcs.kzg.polynomial import Polynomial
from pcs.kzg.prover import open_many
from pcs.kzg.srs import SRS, check_degree
from pcs.kzg.verifier import verify_many

logger = logging.getLogger(__name__)

PROMPT = "Insert the max degree value for the polynomial:"
SUCCESS_LINE = "All evaluations are correct"
FAILURE_LINE = "Some evaluations are NOT correct"


def parse_degree(text):
    """입력 문자열을 최대 차수로 해석한다.

    Raises:
        MalformedInput: 정수로 해석할 수 없을 때
        InvalidDegree: 0 이하이거나 상한을 초과할 때
    """
    try:
        max_degree = int(text.strip())
    except ValueError:
        raise MalformedInput(f"숫자를 입력하세요: {text.strip()!r}") from None
    check_degree(max_degree)
    return max_degree


def create_polynomial(max_degree, random_coeffs=False, rng=None):
    """데모용 max_degree차 다항식을 만든다.

    기본값은 고정 계수 cᵢ = i + 2 (2 + 3x + 4x² + ...).
    random_coeffs=True이면 무작위 계수를 사용한다.
    """
    if random_coeffs:
        return Polynomial.random(max_degree, rng)
    return Polynomial([FR(i + 2) for i in range(max_degree + 1)])


def random_points(rng=None):
    """MIN_QUERY_POINTS~MAX_QUERY_POINTS개의 무작위 평가 점."""
    if rng is None:
        rng = secrets.SystemRandom()
    count = rng.randint(config.MIN_QUERY_POINTS, config.MAX_QUERY_POINTS)
    return [random_scalar(rng) for _ in range(count)]


def run_pipeline(max_degree, rng=None):
    """generate → commit → open_many → verify_many 를 실행하고 검증 결과를 반환한다."""
    polynomial = create_polynomial(max_degree)

    logger.info("Setup phase (max_degree=%d)", max_degree)
    srs = SRS.generate(max_degree, rng=rng)

    logger.info("Commitment phase")
    commitment = commit(srs.g1_powers, polynomial)

    points = random_points(rng)
    logger.info("Opening phase (%d points)", len(points))
    ys, proofs = open_many(srs.g1_powers, polynomial, points)

    logger.info("Verification phase")
    return verify_many(commitment, proofs, points, ys, srs.g2_powers)


def main(stdin=None, stdout=None, rng=None):
    """표준 입력에서 차수를 읽어 데모를 실행하고 종료 코드를 반환한다."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    logging.basicConfig(level=config.LOG_LEVEL, format=config.LOG_FORMAT)

    print(PROMPT, file=stdout)
    try:
        max_degree = parse_degree(stdin.readline())
    except KZGError as e:
        print(f"Error ({e.kind}): {e}", file=stdout)
        return 2

    if run_pipeline(max_degree, rng=rng):
        print(SUCCESS_LINE, file=stdout)
        return 0
    print(FAILURE_LINE, file=stdout)
    return 1


if __name__ == "__main__":
    sys.exit(main())
