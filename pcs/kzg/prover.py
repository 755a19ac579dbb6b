"""
KZG 열기 증명 (Opening Prover)
================================

"P(z) = y" 임을 증명하는 상수 크기 증명을 만든다.

  1. y = P(z)
  2. 몫 다항식 Q(x) = (P(x) - y) / (x - z)
     (P(z) = y이면 (x - z)가 (P(x) - y)를 나누므로 나머지는 항상 0)
  3. 증명 π = Q(τ)·G1 = commit(Q)

여러 점에 대한 열기는 점마다 독립적인 증명을 만든다.
여러 증명을 하나로 집계(aggregation)하지 않는다.

사용 예시:
    >>> y, proof = open_at(srs.g1_powers, p, FR(1))
    >>> ys, proofs = open_many(srs.g1_powers, p, [FR(1), FR(2)])
"""

import logging

from pcs.kzg.commitment import check_fits, commit
from pcs.kzg.field import FR
from pcs.kzg.polynomial import Polynomial, poly_div

logger = logging.getLogger(__name__)


def quotient(polynomial, point, evaluation):
    """몫 다항식 Q(x) = (P(x) - y) / (x - z)를 계산한다."""
    shifted = polynomial - evaluation
    divisor = Polynomial.linear(point)
    q, remainder = poly_div(shifted, divisor)
    # 인수정리: P'(z) = 0 이므로 나머지는 항상 0
    assert remainder.is_zero(), "몫 다항식 계산 실패: 나머지가 0이 아닙니다"
    return q


def open_at(g1_powers, polynomial, point):
    """한 점에서의 평가값과 열기 증명을 만든다.

    Args:
        g1_powers: SRS의 G1 powers
        polynomial: 커밋된 다항식 P(x)
        point: 평가 점 z (FR 원소 또는 정수)

    Returns:
        tuple: (y = P(z), 증명 π)

    Raises:
        InsufficientParameters: 다항식 차수가 SRS 최대 차수를 초과할 때
    """
    check_fits(g1_powers, polynomial)
    if not isinstance(point, FR):
        point = FR(point)

    y = polynomial.evaluate(point)
    proof = commit(g1_powers, quotient(polynomial, point, y))
    logger.debug("Opening at z=%s: y=%s proof=%s", int(point), int(y), proof)
    return y, proof


def open_many(g1_powers, polynomial, points):
    """여러 점에서 평가값과 증명을 만든다 (점마다 독립적인 open_at).

    Returns:
        tuple: (ys, proofs) 입력 점과 같은 순서
    """
    check_fits(g1_powers, polynomial)
    ys = []
    proofs = []
    for point in points:
        y, proof = open_at(g1_powers, polynomial, point)
        ys.append(y)
        proofs.append(proof)
    return ys, proofs
