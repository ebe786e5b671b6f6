"""Consistency checks for loaded keys.

Two levels are offered. The weak check is structural and cheap. The strong check additionally recomputes the CRT
components and runs primality tests on both primes, which dominates its cost. Keys from untrusted sources should
be checked strongly.

Checks never raise and never modify the key, any failing condition fails the whole check.

Typical usage example:

    validate(PublicKeyParams(35, 2))
    validate(priv, strong=True)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from ifkeys import numtheory
from ifkeys.params import PrivateKeyParams
from ifkeys.params import PublicKeyParams

# 5 * 7, the smallest product of two distinct odd primes.
MIN_MODULUS = 35

_log = logging.getLogger(__name__)


def check_public(params: PublicKeyParams, strong: bool = False) -> bool:  # pylint: disable=unused-argument
    """Checks public key parameters.

    Args:
        params: The public key to check.
        strong: Accepted for symmetry with `check_private`, public keys have no stronger check.

    Returns:
        True if the modulus is odd and at least `MIN_MODULUS` and the public exponent at least 2.
    """
    n, e = params.modulus, params.public_exponent
    if n is None or e is None:
        return False
    return not (n < MIN_MODULUS or n % 2 == 0 or e < 2)


def check_private(params: PrivateKeyParams, strong: bool = False) -> bool:
    """Checks private key parameters.

    Args:
        params: The private key to check. Expected to have gone through derivation, unset fields fail.
        strong: Whether to verify the CRT components and the primality of both primes.

    Returns:
        True if every condition of the requested level holds.
    """
    if not check_public(params.public):
        return False
    d, p, q = params.private_exponent, params.prime_p, params.prime_q
    if d < 2 or p < 3 or q < 3 or p * q != params.modulus:
        return False
    if not strong:
        return True
    if params.missing():
        return False
    if (params.crt_exponent_p != d % (p - 1) or params.crt_exponent_q != d % (q - 1)
            or params.crt_coefficient != numtheory.inverse_mod(q, p)):
        return False
    if not numtheory.check_prime(p) or not numtheory.check_prime(q):
        _log.debug("Prime factor of a %d bit modulus failed the primality test", params.modulus.bit_length())
        return False
    return True


def validate(key, strong: bool = False) -> bool:
    """Checks a key at the requested level.

    Args:
        key: A `PublicKeyParams`, `PrivateKeyParams` or a loaded key exposing them as `params`.
        strong: Whether to run the strong checks.

    Returns:
        The verdict of `check_public` or `check_private`.

    Raises:
        TypeError: If `key` is not a key.
    """
    params = getattr(key, "params", key)
    if isinstance(params, PrivateKeyParams):
        return check_private(params, strong)
    if isinstance(params, PublicKeyParams):
        return check_public(params, strong)
    raise TypeError(f"Cannot validate {type(key).__name__}")
