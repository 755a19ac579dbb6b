import sys
import os
import pytest

# 프로젝트 루트를 sys.path에 추가
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from pcs.kzg.field import FR
from pcs.kzg.polynomial import Polynomial
from pcs.kzg.srs import SRS


@pytest.fixture(scope="session")
def srs_small():
    """Small SRS for fast tests (max_degree=8)."""
    return SRS.generate(max_degree=8, seed=42)


@pytest.fixture(scope="session")
def srs_quadratic():
    """SRS with max_degree=2 for the [2, 3, 4] scenario."""
    return SRS.generate(max_degree=2, seed=1234)


@pytest.fixture
def poly_234():
    """P(x) = 2 + 3x + 4x² (P(1) = 9)."""
    return Polynomial([FR(2), FR(3), FR(4)])
