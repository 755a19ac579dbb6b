"""
KZG 열기 증명 검증
====================

검증 방정식 (페어링):
    e(π, [τ - z]₂) == e(C - y·G1, G2)

지수에서 보면 Q(τ)·(τ - z) = P(τ) - y 를 확인하는 것이다.
τ는 아무도 모르는 무작위 점이므로, 이 등식이 성립하면
Q(x)·(x - z) = P(x) - y 가 다항식으로서 성립한다고 볼 수 있다.

검증 실패는 예외가 아니라 False 반환으로 표현한다.
"""

import logging

from pcs.kzg.errors import InsufficientParameters, MalformedInput
from pcs.kzg.field import FR, G1, ec_mul, ec_sub, ec_pairing

logger = logging.getLogger(__name__)


def _check_g2_powers(g2_powers):
    if len(g2_powers) < 2:
        raise InsufficientParameters(
            f"검증에는 G2 powers가 2개 이상 필요합니다: {len(g2_powers)}"
        )


def _pairing_check(commitment, proof, point, evaluation, g2, g2_tau):
    # [τ - z]₂ = τ·G2 - z·G2
    g2_shift = ec_sub(g2_tau, ec_mul(g2, point))

    # C - y·G1 = [P(τ) - y]₁
    commitment_shift = ec_sub(commitment, ec_mul(G1, evaluation))

    lhs = ec_pairing(g2_shift, proof)
    rhs = ec_pairing(g2, commitment_shift)
    return lhs == rhs


def verify(commitment, proof, point, evaluation, g2_powers):
    """KZG 열기 증명을 검증한다.

    Args:
        commitment: 다항식 커밋먼트 C (G1 점)
        proof: 열기 증명 π (G1 점)
        point: 평가 점 z (FR 원소 또는 정수)
        evaluation: 주장하는 평가값 y = P(z) (FR 원소 또는 정수)
        g2_powers: SRS의 G2 powers (최소 [G2, τ·G2])

    Returns:
        bool: 검증 성공 여부

    Raises:
        InsufficientParameters: g2_powers 길이가 2 미만일 때

    예시:
        >>> C = commit(srs.g1_powers, p)
        >>> y, pi = open_at(srs.g1_powers, p, FR(3))
        >>> verify(C, pi, FR(3), y, srs.g2_powers)  # True
    """
    _check_g2_powers(g2_powers)
    if not isinstance(point, FR):
        point = FR(point)
    if not isinstance(evaluation, FR):
        evaluation = FR(evaluation)

    return _pairing_check(commitment, proof, point, evaluation,
                          g2_powers[0], g2_powers[1])


def verify_many(commitment, proofs, points, evaluations, g2_powers):
    """여러 점의 열기 증명을 검증한다.

    모든 점이 통과해야 True이며, 처음 실패한 점에서 바로 False를 반환한다.
    빈 배치는 True이다.

    Raises:
        InsufficientParameters: g2_powers 길이가 2 미만일 때
        MalformedInput: proofs, points, evaluations 길이가 다를 때
    """
    _check_g2_powers(g2_powers)
    if not len(proofs) == len(points) == len(evaluations):
        raise MalformedInput(
            f"배치 길이가 다릅니다: proofs={len(proofs)}, "
            f"points={len(points)}, evaluations={len(evaluations)}"
        )

    for i, (proof, point, evaluation) in enumerate(zip(proofs, points, evaluations)):
        if not verify(commitment, proof, point, evaluation, g2_powers):
            logger.warning("Opening proof %d of %d failed verification", i + 1, len(proofs))
            return False
    return True
