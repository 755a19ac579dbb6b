"""
KZG 기반 모듈: 스칼라 필드 및 타원곡선 연산
=============================================

KZG 커밋먼트 스킴이 외부 협력자로 사용하는 대수적 도구를 정의한다.

**스칼라 필드 FR**:
  BLS12-381 곡선의 스칼라 필드. 다항식 계수, 평가 점, 평가값,
  비밀 값 τ가 모두 이 필드의 원소이다.
  - 위수(order) r ≈ 2^255, 소수체(prime field)

**타원곡선 연산**:
  G1, G2 그룹의 생성자, 스칼라 곱셈, 덧셈/뺄셈 및 쌍선형 페어링.
  py_ecc는 affine 좌표를 사용하며 무한원점(항등원)은 None이다.

**무작위 스칼라**:
  암호학적으로 안전한 난수원(secrets.SystemRandom)을 기본으로 하되,
  테스트 재현성을 위해 random.Random 호환 객체를 주입할 수 있다.

사용 예시:
    >>> from pcs.kzg.field import FR, G1, ec_mul
    >>> a = FR(3)
    >>> b = FR(7)
    >>> c = a * b        # FR(21)
    >>> P = ec_mul(G1, 5)  # 5·G1
"""

import secrets

from py_ecc.fields import bls12_381_FQ as FQ
from py_ecc import bls12_381


# ─────────────────────────────────────────────────────────────────────
# 스칼라 필드 FR
# ─────────────────────────────────────────────────────────────────────

class FR(FQ):
    """BLS12-381 스칼라 필드 위의 유한체 원소.

    py_ecc의 FQ 클래스를 상속하여 +, -, *, /, ** 등의 필드 연산을 제공한다.

    예시:
        >>> x = FR(3)
        >>> x * x          # FR(9)
        >>> FR(1) / FR(3)   # 3의 모듈러 역원
    """
    field_modulus = bls12_381.curve_order


# 곡선 위수 (스칼라 필드 크기)
CURVE_ORDER = bls12_381.curve_order


# ─────────────────────────────────────────────────────────────────────
# 타원곡선 상수 및 연산
# ─────────────────────────────────────────────────────────────────────

# G1 그룹 생성자 (generator)
G1 = bls12_381.G1

# G2 그룹 생성자 (generator)
G2 = bls12_381.G2

# 영점 (point at infinity) - 항등원
Z1 = None


def ec_mul(point, scalar):
    """타원곡선 스칼라 곱셈: scalar · point.

    Args:
        point: G1 또는 G2 위의 점 (None이면 항등원)
        scalar: 정수 또는 FR 원소

    Returns:
        scalar · point (같은 그룹의 점)
    """
    if point is None:
        return None
    if isinstance(scalar, FR):
        scalar = int(scalar)
    return bls12_381.multiply(point, scalar % CURVE_ORDER)


def ec_add(p1, p2):
    """타원곡선 점 덧셈: p1 + p2."""
    return bls12_381.add(p1, p2)


def ec_neg(point):
    """타원곡선 점의 역원 (negation): -point."""
    return bls12_381.neg(point)


def ec_sub(p1, p2):
    """타원곡선 점 뺄셈: p1 - p2."""
    return ec_add(p1, ec_neg(p2))


def ec_pairing(g2_point, g1_point):
    """쌍선형 페어링 e(G1, G2) → GT.

    e(a·P, b·Q) = e(P, Q)^(a·b)

    주의:
        py_ecc.bls12_381.pairing의 인자 순서는 (G2, G1)이다.
        어느 한쪽이 무한원점이면 GT의 항등원(FQ12.one())을 반환한다.
    """
    return bls12_381.pairing(g2_point, g1_point)


def is_g1_point(point):
    """G1의 소수 위수 부분군에 속하는 점인지 확인한다."""
    if point is None:
        return True
    if not bls12_381.is_on_curve(point, bls12_381.b):
        return False
    return bls12_381.multiply(point, CURVE_ORDER) is None


def is_g2_point(point):
    """G2(twist 곡선)의 소수 위수 부분군에 속하는 점인지 확인한다."""
    if point is None:
        return True
    if not bls12_381.is_on_curve(point, bls12_381.b2):
        return False
    return bls12_381.multiply(point, CURVE_ORDER) is None


# ─────────────────────────────────────────────────────────────────────
# 무작위 스칼라
# ─────────────────────────────────────────────────────────────────────

def random_scalar(rng=None, nonzero=False):
    """FR에서 균등하게 무작위 원소를 뽑는다.

    Args:
        rng: randrange를 제공하는 난수원. None이면 secrets.SystemRandom().
        nonzero: True이면 0을 제외한다 (τ 샘플링용).

    Returns:
        FR: 무작위 스칼라
    """
    if rng is None:
        rng = secrets.SystemRandom()
    low = 1 if nonzero else 0
    return FR(rng.randrange(low, CURVE_ORDER))
