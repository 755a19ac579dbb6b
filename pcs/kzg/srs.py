"""
KZG Structured Reference String (SRS)
=======================================

신뢰 설정(trusted setup)으로 공개 파라미터를 생성한다.

**SRS란?**
  KZG 다항식 커밋먼트 스킴에 필요한 공개 파라미터이다.
  비밀 값 τ ("toxic waste")를 사용하여 생성되며,
  생성 후 τ는 반드시 폐기되어야 한다.

  SRS = {
      G1 powers: [G1, τ·G1, τ²·G1, ..., τ^d·G1]
      G2 powers: [G2, τ·G2, τ²·G2, ..., τ^d·G2]
  }

  두 수열은 같은 τ와 같은 길이(d + 1)를 공유한다.

**보안**:
  τ를 아는 사람은 임의의 거짓 증명을 만들 수 있다.
  여기서는 τ를 프로세스 안에서 생성하고 지역 변수로만 사용한다.
  다자간 설정 의식(MPC ceremony)은 다루지 않는다.

사용 예시:
    >>> srs = SRS.generate(max_degree=16, seed=42)
    >>> len(srs.g1_powers)  # 17 (0차부터 16차까지)
"""

import hashlib
import logging

from pcs.kzg import config
from pcs.kzg.errors import InvalidDegree
from pcs.kzg.field import FR, G1, G2, ec_mul, random_scalar, CURVE_ORDER

logger = logging.getLogger(__name__)


class SRS:
    """Structured Reference String: KZG 커밋먼트용 공개 파라미터.

    속성:
        g1_powers: [G1, τ·G1, τ²·G1, ..., τ^d·G1]
        g2_powers: [G2, τ·G2, τ²·G2, ..., τ^d·G2]
        max_degree: 지원하는 최대 다항식 차수 d

    생성 후에는 읽기 전용으로 취급한다.
    """

    def __init__(self, g1_powers, g2_powers, max_degree):
        self.g1_powers = g1_powers
        self.g2_powers = g2_powers
        self.max_degree = max_degree

    def __repr__(self):
        return f"SRS(max_degree={self.max_degree})"

    @classmethod
    def generate(cls, max_degree, seed=None, rng=None):
        """SRS를 생성한다.

        Args:
            max_degree: 지원할 최대 다항식 차수 (1 이상, MAX_DEGREE_LIMIT 이하).
            seed: 결정론적 생성을 위한 시드 (데모/교육용).
            rng: randrange를 제공하는 난수원. seed가 없을 때 사용하며
                 None이면 secrets.SystemRandom().

        Returns:
            SRS: 생성된 구조화 참조 문자열

        Raises:
            InvalidDegree: max_degree가 정수가 아니거나 범위를 벗어날 때
        """
        check_degree(max_degree)

        tau = _sample_tau(seed, rng)

        # G1 powers: [G1, τ·G1, τ²·G1, ..., τ^d·G1]
        g1_powers = []
        tau_power = FR(1)
        for _ in range(max_degree + 1):
            g1_powers.append(ec_mul(G1, tau_power))
            tau_power = tau_power * tau

        # G2 powers: [G2, τ·G2, τ²·G2, ..., τ^d·G2]
        g2_powers = []
        tau_power = FR(1)
        for _ in range(max_degree + 1):
            g2_powers.append(ec_mul(G2, tau_power))
            tau_power = tau_power * tau

        logger.debug("Public parameters G1: %s", g1_powers)
        logger.debug("Public parameters G2: %s", g2_powers)

        return cls(g1_powers, g2_powers, max_degree)


def check_degree(max_degree, limit=None):
    """최대 차수가 양의 정수이고 상한 이하인지 확인한다.

    Raises:
        InvalidDegree: 조건을 만족하지 않을 때
    """
    if limit is None:
        limit = config.MAX_DEGREE_LIMIT
    if isinstance(max_degree, bool) or not isinstance(max_degree, int):
        raise InvalidDegree(f"차수는 정수여야 합니다: {max_degree!r}")
    if max_degree < 1:
        raise InvalidDegree("차수는 0보다 커야 합니다")
    if max_degree > limit:
        raise InvalidDegree(f"차수 {max_degree}가 상한 {limit}을 초과합니다")


def _sample_tau(seed, rng):
    """toxic waste τ를 뽑는다 (0이 아닌 스칼라)."""
    if seed is not None:
        h = hashlib.sha256(str(seed).encode()).digest()
        return FR(int.from_bytes(h, "big") % (CURVE_ORDER - 1) + 1)
    return random_scalar(rng, nonzero=True)
