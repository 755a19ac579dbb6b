"""
KZG 다항식 커밋먼트
=====================

다항식 P(x)를 하나의 G1 원소로 줄인다.

  C = Σᵢ cᵢ · [τⁱ]₁ = P(τ) · G1

τ를 모르는 상태에서 SRS의 G1 powers 선형결합으로 P(τ)·G1을 계산한다.
같은 (SRS, 다항식)에 대해 항상 같은 결과를 낸다 (무작위성 없음).

바인딩(binding): 최대 차수 이하의 서로 다른 두 다항식이 같은 커밋먼트를
가질 확률은 무시할 만하다 (이산로그 난제 가정).
"""

import logging

from pcs.kzg.errors import InsufficientParameters
from pcs.kzg.field import FR, ec_mul, ec_add

logger = logging.getLogger(__name__)


def check_fits(g1_powers, polynomial):
    """다항식 차수가 SRS 길이 안에 들어가는지 확인한다.

    Raises:
        InsufficientParameters: degree > len(g1_powers) - 1
    """
    if polynomial.degree > len(g1_powers) - 1:
        raise InsufficientParameters(
            f"다항식 차수 {polynomial.degree}가 SRS 최대 차수 "
            f"{len(g1_powers) - 1}를 초과합니다"
        )


def commit(g1_powers, polynomial):
    """다항식을 KZG 커밋한다.

    Args:
        g1_powers: SRS의 G1 powers [G1, τG1, τ²G1, ...]
        polynomial: 커밋할 다항식 (Polynomial)

    Returns:
        G1 점: 커밋먼트 C (영 다항식이면 무한원점 None)

    Raises:
        InsufficientParameters: 다항식 차수가 SRS 최대 차수를 초과할 때

    예시:
        >>> p = Polynomial([FR(1), FR(2), FR(3)])  # 1 + 2x + 3x²
        >>> C = commit(srs.g1_powers, p)  # (1 + 2τ + 3τ²)·G1
    """
    check_fits(g1_powers, polynomial)

    # C = Σ cᵢ · [τⁱ]₁
    result = None
    for i, coeff in enumerate(polynomial.coeffs):
        if coeff == FR(0):
            continue
        result = ec_add(result, ec_mul(g1_powers[i], coeff))

    logger.debug("Commitment: %s", result)
    return result
