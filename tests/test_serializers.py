import pytest

from kzg_serializers import (
    serialize_fr, deserialize_fr, deserialize_fr_list,
    serialize_g1, deserialize_g1, deserialize_g1_list,
    serialize_g2, deserialize_g2,
    serialize_poly, deserialize_poly,
    serialize_srs, deserialize_srs,
    g1_short, g2_short, fr_short,
)
from pcs.kzg.errors import MalformedInput
from pcs.kzg.field import FR, G1, G2, CURVE_ORDER, ec_mul
from pcs.kzg.polynomial import Polynomial


class TestScalars:
    def test_fr(self):
        assert serialize_fr(FR(42)) == "42"
        assert deserialize_fr("42") == FR(42)
        assert deserialize_fr(42) == FR(42)

    def test_fr_reduces_modulo_order(self):
        assert deserialize_fr(str(CURVE_ORDER + 1)) == FR(1)

    @pytest.mark.parametrize("bad", ["abc", None, True, [1]])
    def test_fr_malformed(self, bad):
        with pytest.raises(MalformedInput):
            deserialize_fr(bad)

    def test_fr_list_requires_list(self):
        with pytest.raises(MalformedInput):
            deserialize_fr_list("1,2")


class TestPoints:
    def test_g1_roundtrip_checked(self):
        point = ec_mul(G1, 12345)
        assert deserialize_g1(serialize_g1(point), check=True) == point

    def test_g1_infinity(self):
        assert serialize_g1(None) is None
        assert deserialize_g1(None, check=True) is None

    def test_g1_off_curve_rejected(self):
        with pytest.raises(MalformedInput):
            deserialize_g1(["1", "1"], check=True)

    def test_g1_unchecked_does_not_validate(self):
        assert deserialize_g1(["1", "1"]) is not None

    @pytest.mark.parametrize("bad", [["1"], "12", ["1", "2", "3"], ["x", "1"]])
    def test_g1_wrong_shape(self, bad):
        with pytest.raises(MalformedInput):
            deserialize_g1(bad)

    def test_g1_list(self):
        data = [serialize_g1(G1), None]
        assert deserialize_g1_list(data, check=True) == [G1, None]

    def test_g2_roundtrip_checked(self):
        assert deserialize_g2(serialize_g2(G2), check=True) == G2

    def test_g2_off_curve_rejected(self):
        with pytest.raises(MalformedInput):
            deserialize_g2([["1", "0"], ["1", "0"]], check=True)


class TestPolyAndSRS:
    def test_poly(self):
        poly = Polynomial([2, 3, 4])
        assert serialize_poly(poly) == ["2", "3", "4"]
        assert deserialize_poly(["2", "3", "4"]) == poly

    def test_srs(self, srs_quadratic):
        data = serialize_srs(srs_quadratic)
        assert set(data) == {"max_degree", "g1_powers", "g2_powers"}
        srs = deserialize_srs(data)
        assert srs.max_degree == 2
        assert srs.g1_powers == srs_quadratic.g1_powers
        assert srs.g2_powers == srs_quadratic.g2_powers


class TestShortDisplay:
    def test_short(self):
        assert g1_short(None) == "∞"
        assert g2_short(None) == "∞"
        assert fr_short(FR(7)) == "7"
        assert "..." in fr_short(FR(CURVE_ORDER - 1))
        assert g1_short(G1).startswith("(")
        assert "i, ...)" in g2_short(G2)
