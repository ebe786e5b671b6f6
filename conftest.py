"""Configures pytest further."""
from cryptography.hazmat.primitives.asymmetric import rsa
import pytest

from ifkeys import PrivateKeyParams

TARGET_SIZES = [1024, 2048, pytest.param(3072, marks=pytest.mark.slow)]
E = 65537
_known_keys: dict[int, rsa.RSAPrivateKey] = {}


def pytest_addoption(parser):
    parser.addoption("--skip-slow", action="store_true", default=False, help="skip slower tests")
    parser.addoption("--run-extreme", action="store_true", default=False, help="run extreme value extremely slow tests")


def pytest_collection_modifyitems(config, items):
    skipdict = {}
    if config.getoption("--skip-slow"):
        skipdict["slow"] = pytest.mark.skip(reason="Slow test: needs no --skip-slow option")
    if not config.getoption("--run-extreme"):
        skipdict["extreme"] = pytest.mark.skip(reason="Extreme test: needs --run-extreme option")
    if not skipdict:
        return
    for item in items:
        for k, v in skipdict.items():
            if k in item.keywords:
                item.add_marker(v)


def known_key(size: int) -> rsa.RSAPrivateKey:
    """Generates each reference key once per session."""
    if size not in _known_keys:
        _known_keys[size] = rsa.generate_private_key(public_exponent=E, key_size=size)
    return _known_keys[size]


def localize_params(pk: rsa.RSAPrivateKey) -> PrivateKeyParams:
    privs = pk.private_numbers()
    pubs = pk.public_key().public_numbers()
    return PrivateKeyParams(pubs.e, privs.d, privs.p, privs.q, pubs.n, privs.dmp1, privs.dmq1, privs.iqmp)


@pytest.fixture(scope="session", params=TARGET_SIZES)
def keyset(request) -> tuple[rsa.RSAPrivateKey, PrivateKeyParams]:
    """A reference key together with its parameters."""
    pk = known_key(request.param)
    return pk, localize_params(pk)


@pytest.fixture(autouse=True)
def default_load_check(monkeypatch):
    """Every test starts from the default load check."""
    monkeypatch.setattr("ifkeys.keys._LOAD_CHECK", "weak")
