# tests/conftest.py
import pytest

from consult.data.loader import get_seed_table
from consult.models.io import BenchmarkEntry

@pytest.fixture
def seed():
    return get_seed_table()

@pytest.fixture
def saas(seed) -> BenchmarkEntry:
    # ctr ok 0.015 / good 0.02, lpCv ok 0.03 / good 0.06, cacToLtv ok 0.33
    return seed.get("B2B SaaS")

@pytest.fixture
def local(seed) -> BenchmarkEntry:
    return seed.get("Local Service")
