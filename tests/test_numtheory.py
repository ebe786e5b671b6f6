# pylint: disable=protected-access,missing-module-docstring
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import pytest
import sympy

from ifkeys import numtheory

base_primetest_cases = [
    # Edge Cases (neither)
    (0, False),
    (1, False),
    # Known Primes
    (2, True),
    (3, True),
    (5, True),
    (7, True),
    (101, True),
    (3571, True),
    (9973, True),
    # Composite
    (4, False),
    (6, False),
    (9, False),
    (35, False),
    # Fermat Pseudoprimes (numbers that fool naive tests)
    (341, False),  # 11 * 31
    (561, False),  # 3 * 11 * 17 (Carmichael number)
    (1105, False),  # 5 * 13 * 17 (Carmichael number)
    # Pseudo-prime (PsP)
    (121, False),
    (703, False),
    (781, False),
    (1541, False),
    (2047, False),
    (52633, False),
]

large_primetest_cases = [
    (2**127 - 1, True),
    (2**521 - 1, True),
    ((2**127 - 1) * 3, False),
    ((2**127 - 1) * (2**89 - 1), False),
    (2**521 + 1, False),
    pytest.param(2**4423 - 1, True, marks=pytest.mark.slow, id="LargeInt-4423bits"),
    pytest.param(2**44497 - 1, True, marks=pytest.mark.extreme, id="LargeInt-44497bits"),
]


def id_generator(param):
    if isinstance(param, int) and param > 1000000:
        return f"LargeInt-{param.bit_length()}bits"
    return str(param)


@pytest.mark.parametrize("n", [0, 1, 2, 20, 50, 1000, 5000, 10000])
def test_sieve_sane(n):
    assert numtheory._sieve(n) == list(sympy.primerange(n + 1))


@pytest.mark.parametrize("n,expected", [(10**5, 9592), pytest.param(10**6, 78498, marks=pytest.mark.slow)])
def test_sieve_large_approx(n, expected):
    assert len(numtheory._sieve(n)) == expected


@pytest.mark.parametrize("n", [-27358709381728, -10, -1])
def test_get_pre_primes_errors(n):
    with pytest.raises(ValueError):
        numtheory.get_pre_primes(n)


def test_get_pre_primes_caches(mocker):
    mocked_primes = [2, 3, 5, 7, 11]
    mocker.patch("ifkeys.numtheory._sieve", return_value=mocked_primes)
    mocker.patch("ifkeys.numtheory._SMALL_PRIMES", [])
    mocker.patch("ifkeys.numtheory._SMALL_PRIMES_CAP", 0)

    rs = numtheory.get_pre_primes(50)
    numtheory._sieve.assert_called_once_with(50)
    assert rs == mocked_primes


def test_get_pre_primes_cache_hit(mocker):
    mocked_primes = [2, 3, 5, 7, 11]
    mocker.patch("ifkeys.numtheory._sieve")
    mocker.patch("ifkeys.numtheory._SMALL_PRIMES", mocked_primes)
    mocker.patch("ifkeys.numtheory._SMALL_PRIMES_CAP", 50)

    assert numtheory.get_pre_primes(25) == mocked_primes
    assert numtheory.get_pre_primes(50) == mocked_primes
    numtheory._sieve.assert_not_called()


def test_get_pre_primes_cache_miss(mocker):
    greater_mocked_primes = [2, 3, 5, 7, 11, 13, 17, 19, 23]
    mocker.patch("ifkeys.numtheory._sieve", return_value=greater_mocked_primes)
    mocker.patch("ifkeys.numtheory._SMALL_PRIMES", [2, 3, 5, 7, 11])
    mocker.patch("ifkeys.numtheory._SMALL_PRIMES_CAP", 50)

    rs = numtheory.get_pre_primes(75)
    numtheory._sieve.assert_called_once_with(75)
    assert rs == greater_mocked_primes


@pytest.mark.parametrize("num,expected", base_primetest_cases, ids=id_generator)
def test_trial_division(num, expected):
    assert numtheory._trial_division(num) == expected


@pytest.mark.parametrize("n,expected", base_primetest_cases + large_primetest_cases, ids=id_generator)
def test_miller_rabin(n, expected):
    assert numtheory._miller_rabin(n, 5) == expected


@pytest.mark.parametrize("n,expected", base_primetest_cases + large_primetest_cases, ids=id_generator)
def test_check_prime(n, expected):
    assert numtheory.check_prime(n) == expected


def test_check_prime_matches_sympy():
    assert [n for n in range(-5, 5000) if numtheory.check_prime(n)] == list(sympy.primerange(5000))


def test_check_prime_reference(keyset):
    _, params = keyset
    assert numtheory.check_prime(params.prime_p)
    assert numtheory.check_prime(params.prime_q)
    assert not numtheory.check_prime(params.modulus)
    assert not numtheory.check_prime(params.prime_p + 2) or sympy.isprime(params.prime_p + 2)


@pytest.mark.parametrize("a,b", [(240, 46), (7, 5), (5, 7), (0, 9), (17, 17), (2**127 - 1, 2**89 - 1)])
def test_eea(a, b):
    g, s, t = numtheory.eea(a, b)
    assert g == sympy.gcd(a, b)
    assert a * s + b * t == g


@pytest.mark.parametrize("a,modulus,expected", [
    (7, 5, 3),
    (3, 7, 5),
    (1, 2, 1),
    (12, 5, 3),
    (2, 4, None),
    (9, 6, None),
    (0, 5, None),
    (3, 0, None),
    (3, -7, None),
])
def test_inverse_mod(a, modulus, expected):
    assert numtheory.inverse_mod(a, modulus) == expected


def test_inverse_mod_reference(keyset):
    _, params = keyset
    assert numtheory.inverse_mod(params.prime_q, params.prime_p) == params.crt_coefficient
    assert numtheory.inverse_mod(params.prime_q, params.prime_p) == pow(params.prime_q, -1, params.prime_p)
