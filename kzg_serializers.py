"""
KZG 데이터 직렬화/역직렬화 헬퍼
==================================

TinyDB와 JSON 응답에 담을 수 있는 형태로 KZG 객체를 변환한다.
FR, G1, G2, Polynomial, SRS.

사용자가 보낸 점(커밋먼트, 증명)은 check=True로 역직렬화하여
곡선 위의 점이고 소수 위수 부분군에 속하는지 확인한다.
"""

from py_ecc import bls12_381

from pcs.kzg.errors import MalformedInput
from pcs.kzg.field import FR, is_g1_point, is_g2_point
from pcs.kzg.polynomial import Polynomial
from pcs.kzg.srs import SRS


def _to_int(value):
    if isinstance(value, bool):
        raise MalformedInput(f"정수가 아닙니다: {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise MalformedInput(f"정수가 아닙니다: {value!r}") from None


def _pair(data):
    if not isinstance(data, (list, tuple)) or len(data) != 2:
        raise MalformedInput(f"길이 2의 리스트가 필요합니다: {data!r}")
    return data


# ─── FR ───

def serialize_fr(val):
    """FR → str(int)"""
    return str(int(val))


def deserialize_fr(s):
    """str(int) 또는 int → FR"""
    return FR(_to_int(s))


def serialize_fr_list(vals):
    return [serialize_fr(v) for v in vals]


def deserialize_fr_list(data):
    if not isinstance(data, list):
        raise MalformedInput(f"리스트가 필요합니다: {data!r}")
    return [deserialize_fr(s) for s in data]


# ─── G1 point ───

def serialize_g1(point):
    """G1 point → [str, str] or None"""
    if point is None:
        return None
    return [str(int(point[0])), str(int(point[1]))]


def deserialize_g1(data, check=False):
    """[str, str] or None → G1 point"""
    if data is None:
        return None
    x, y = _pair(data)
    point = (bls12_381.FQ(_to_int(x)), bls12_381.FQ(_to_int(y)))
    if check and not is_g1_point(point):
        raise MalformedInput("G1 부분군의 점이 아닙니다")
    return point


def serialize_g1_list(points):
    return [serialize_g1(p) for p in points]


def deserialize_g1_list(data, check=False):
    if not isinstance(data, list):
        raise MalformedInput(f"리스트가 필요합니다: {data!r}")
    return [deserialize_g1(d, check=check) for d in data]


# ─── G2 point ───

def serialize_g2(point):
    """G2 point → [[str,str],[str,str]] or None"""
    if point is None:
        return None
    return [
        [str(int(point[0].coeffs[0])), str(int(point[0].coeffs[1]))],
        [str(int(point[1].coeffs[0])), str(int(point[1].coeffs[1]))]
    ]


def deserialize_g2(data, check=False):
    """[[str,str],[str,str]] or None → G2 point"""
    if data is None:
        return None
    x, y = _pair(data)
    x0, x1 = _pair(x)
    y0, y1 = _pair(y)
    point = (
        bls12_381.FQ2([_to_int(x0), _to_int(x1)]),
        bls12_381.FQ2([_to_int(y0), _to_int(y1)])
    )
    if check and not is_g2_point(point):
        raise MalformedInput("G2 부분군의 점이 아닙니다")
    return point


# ─── Polynomial ───

def serialize_poly(poly):
    """Polynomial → list of str (계수)"""
    if poly is None:
        return None
    return [str(int(c)) for c in poly.coeffs]


def deserialize_poly(data):
    """list of str → Polynomial"""
    if data is None:
        return None
    return Polynomial(deserialize_fr_list(data))


# ─── SRS ───

def serialize_srs(srs):
    """SRS → dict (τ는 애초에 SRS에 없으므로 공개 파라미터만 담긴다)"""
    return {
        "max_degree": srs.max_degree,
        "g1_powers": serialize_g1_list(srs.g1_powers),
        "g2_powers": [serialize_g2(p) for p in srs.g2_powers],
    }


def deserialize_srs(data):
    """dict → SRS"""
    if data is None:
        return None
    return SRS(
        deserialize_g1_list(data["g1_powers"]),
        [deserialize_g2(p) for p in data["g2_powers"]],
        data["max_degree"],
    )


# ─── 화면 표시용 축약 ───

def _shorten(s):
    if len(s) <= 10:
        return s
    return s[:4] + "..." + s[-4:]


def g1_short(point):
    """G1 point → 축약 문자열 (UI 표시용)"""
    if point is None:
        return "∞"
    return f"({_shorten(str(int(point[0])))}, {_shorten(str(int(point[1])))})"


def g2_short(point):
    """G2 point → 축약 문자열 (UI 표시용)"""
    if point is None:
        return "∞"
    x0 = str(int(point[0].coeffs[0]))
    x1 = str(int(point[0].coeffs[1]))
    return f"({_shorten(x0)}+{_shorten(x1)}i, ...)"


def fr_short(val):
    """FR → 축약 문자열 (UI 표시용)"""
    if val is None:
        return "None"
    return _shorten(str(int(val)))
