"""
KZG 기반 모듈: 밀집(dense) 다항식
====================================

계수 표현 기반 다항식 p(x) = c₀ + c₁·x + c₂·x² + ... 와 긴 나눗셈.

KZG에서의 역할:
  - 커밋 대상 다항식 P(x)
  - 열기 증명의 몫 다항식 Q(x) = (P(x) - y) / (x - z)

사용 예시:
    >>> from pcs.kzg.polynomial import Polynomial, poly_div
    >>> p = Polynomial([FR(2), FR(3), FR(4)])  # 2 + 3x + 4x²
    >>> p.evaluate(FR(1))  # FR(9)
"""

import secrets

from pcs.kzg.field import FR, CURVE_ORDER


class Polynomial:
    """유한체 FR 위의 다항식.

    계수 리스트로 표현: coeffs = [c₀, c₁, c₂, ...] → c₀ + c₁x + c₂x² + ...
    생성 후에는 변경하지 않는다 (모든 연산은 새 다항식을 반환).

    예시:
        >>> p = Polynomial([FR(1), FR(2)])  # 1 + 2x
        >>> q = Polynomial([FR(3), FR(4)])  # 3 + 4x
        >>> r = p + q                        # 4 + 6x
        >>> r = p * q                        # 3 + 10x + 8x²
    """

    def __init__(self, coeffs=None):
        """다항식 생성.

        Args:
            coeffs: FR 원소 또는 정수의 리스트 [c₀, c₁, ...].
                    None이거나 비어 있으면 영 다항식(0)을 생성한다.
        """
        if not coeffs:
            self.coeffs = [FR(0)]
        else:
            self.coeffs = [c if isinstance(c, FR) else FR(c) for c in coeffs]
        self._trim()

    def _trim(self):
        """최고차 계수가 0인 항을 제거하여 정규화한다.

        예: [1, 2, 0, 0] → [1, 2]  (1 + 2x)
        """
        while len(self.coeffs) > 1 and self.coeffs[-1] == FR(0):
            self.coeffs.pop()

    @property
    def degree(self):
        """다항식의 차수. 영 다항식의 차수는 0으로 정의한다."""
        return len(self.coeffs) - 1

    def is_zero(self):
        """영 다항식인지 확인."""
        return len(self.coeffs) == 1 and self.coeffs[0] == FR(0)

    def evaluate(self, point):
        """다항식을 주어진 점에서 평가한다 (Horner's method).

        p(x) = c₀ + x(c₁ + x(c₂ + ...))

        예시:
            >>> p = Polynomial([FR(2), FR(3), FR(4)])
            >>> p.evaluate(FR(1))  # 2 + 3 + 4 = FR(9)
        """
        if not isinstance(point, FR):
            point = FR(point)
        result = FR(0)
        for coeff in reversed(self.coeffs):
            result = result * point + coeff
        return result

    def __add__(self, other):
        """다항식 덧셈: p(x) + q(x)."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        max_len = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(max_len):
            a = self.coeffs[i] if i < len(self.coeffs) else FR(0)
            b = other.coeffs[i] if i < len(other.coeffs) else FR(0)
            result.append(a + b)
        return Polynomial(result)

    def __radd__(self, other):
        return self.__add__(other)

    def __sub__(self, other):
        """다항식 뺄셈: p(x) - q(x). 상수를 빼면 상수항에서만 뺀다."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        max_len = max(len(self.coeffs), len(other.coeffs))
        result = []
        for i in range(max_len):
            a = self.coeffs[i] if i < len(self.coeffs) else FR(0)
            b = other.coeffs[i] if i < len(other.coeffs) else FR(0)
            result.append(a - b)
        return Polynomial(result)

    def __rsub__(self, other):
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        return other.__sub__(self)

    def __neg__(self):
        """다항식 부호 반전: -p(x)."""
        return Polynomial([-c for c in self.coeffs])

    def __mul__(self, other):
        """다항식 곱셈: p(x) · q(x) 또는 스칼라곱."""
        if isinstance(other, (int, FR)):
            if isinstance(other, int):
                other = FR(other)
            return Polynomial([c * other for c in self.coeffs])
        result = [FR(0)] * (len(self.coeffs) + len(other.coeffs) - 1)
        for i, a in enumerate(self.coeffs):
            for j, b in enumerate(other.coeffs):
                result[i + j] = result[i + j] + a * b
        return Polynomial(result)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __eq__(self, other):
        """다항식 동등 비교."""
        if isinstance(other, (int, FR)):
            other = Polynomial([other])
        if not isinstance(other, Polynomial):
            return False
        return self.coeffs == other.coeffs

    def __repr__(self):
        terms = []
        for i, c in enumerate(self.coeffs):
            if c == FR(0):
                continue
            if i == 0:
                terms.append(str(int(c)))
            elif i == 1:
                terms.append(f"{int(c)}*x")
            else:
                terms.append(f"{int(c)}*x^{i}")
        return "Poly(" + " + ".join(terms) + ")" if terms else "Poly(0)"

    def __len__(self):
        """계수 개수 반환 (차수 + 1)."""
        return len(self.coeffs)

    @classmethod
    def zero(cls):
        """영 다항식 p(x) = 0."""
        return cls([FR(0)])

    @classmethod
    def linear(cls, root):
        """일차 다항식 x - root.

        열기 증명의 제수 D(x) = x - z. 계수는 [-z, 1]이므로
        어떤 z에 대해서도 영 다항식이 되지 않는다.
        """
        if not isinstance(root, FR):
            root = FR(root)
        return cls([-root, FR(1)])

    @classmethod
    def random(cls, degree, rng=None):
        """차수 degree의 무작위 다항식 (최고차 계수는 0이 아님)."""
        if rng is None:
            rng = secrets.SystemRandom()
        coeffs = [FR(rng.randrange(CURVE_ORDER)) for _ in range(degree)]
        coeffs.append(FR(rng.randrange(1, CURVE_ORDER)))
        return cls(coeffs)


# ─────────────────────────────────────────────────────────────────────
# 다항식 나눗셈 (Polynomial Long Division)
# ─────────────────────────────────────────────────────────────────────

def poly_div(a, b):
    """다항식 나눗셈: a(x) = b(x) · q(x) + r(x).

    긴 나눗셈(long division) 알고리즘으로 몫 q(x)와 나머지 r(x)를 계산한다.
    KZG 열기 증명에서 (P(x) - y) / (x - z) 계산에 사용된다.

    Args:
        a: 피제수 다항식 (Polynomial)
        b: 제수 다항식 (Polynomial)

    Returns:
        tuple: (몫 Polynomial, 나머지 Polynomial)

    Raises:
        ValueError: 제수가 영 다항식인 경우

    예시:
        >>> a = Polynomial([FR(-1), FR(0), FR(1)])  # x² - 1
        >>> b = Polynomial([FR(-1), FR(1)])          # x - 1
        >>> q, r = poly_div(a, b)
        >>> q  # x + 1
        >>> r  # 0
    """
    if b.is_zero():
        raise ValueError("0으로 나눌 수 없습니다")

    remainder = list(a.coeffs)
    divisor = b.coeffs
    deg_b = len(divisor) - 1
    deg_a = len(remainder) - 1

    if deg_a < deg_b:
        return Polynomial.zero(), Polynomial(remainder)

    # 몫 계수 (최고차부터 계산)
    quotient = [FR(0)] * (deg_a - deg_b + 1)
    lead_inv = FR(1) / divisor[-1]

    for i in range(deg_a - deg_b, -1, -1):
        coeff = remainder[i + deg_b] * lead_inv
        quotient[i] = coeff
        for j in range(deg_b + 1):
            remainder[i + j] = remainder[i + j] - coeff * divisor[j]

    return Polynomial(quotient), Polynomial(remainder[:deg_b] or [FR(0)])
