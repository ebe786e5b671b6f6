"""Rebuilds the private key fields that compact encodings may leave out.

Every rule reads only the primes and the private exponent, so the order of application does not matter. Supplied
values are kept as they are, even when inconsistent; catching that is the job of `ifkeys.validation`.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging

from ifkeys import numtheory
from ifkeys.params import PrivateKeyParams

_log = logging.getLogger(__name__)


def _crt_exponent(d: int, prime: int) -> int | None:
    if prime - 1 == 0:
        return None
    return d % (prime - 1)


def derive_private(params: PrivateKeyParams) -> PrivateKeyParams:
    """Fills in the unset modulus and CRT components of a private key.

    Never raises. A component which cannot be computed from degenerate inputs (a prime of 1, primes sharing a
    factor) stays unset.

    Args:
        params: The private key parameters as populated by a decoder or a caller.

    Returns:
        The parameters with every derivable field computed that was unset.
    """
    missing = params.missing()
    if not missing:
        return params
    p, q, d = params.prime_p, params.prime_q, params.private_exponent
    derived = {}
    if params.modulus is None:
        derived["modulus"] = p * q
    if params.crt_exponent_p is None:
        derived["crt_exponent_p"] = _crt_exponent(d, p)
    if params.crt_exponent_q is None:
        derived["crt_exponent_q"] = _crt_exponent(d, q)
    if params.crt_coefficient is None:
        derived["crt_coefficient"] = numtheory.inverse_mod(q, p)
    result = params._replace(**derived)
    _log.debug("Derived private key fields %s, still unset: %s", ", ".join(missing), result.missing())
    return result
