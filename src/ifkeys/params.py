"""Key parameter model for integer-factorization key pairs.

The parameter sets are plain immutable value objects. They enforce no invariants themselves, that is left to
`ifkeys.validation`, so that structurally decoded but algebraically broken keys can still be inspected.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import typing

DERIVABLE_FIELDS = ("modulus", "crt_exponent_p", "crt_exponent_q", "crt_coefficient")


class PublicKeyParams(typing.NamedTuple):
    """Public half of a key pair.

    Attributes:
        modulus: The modulus of the keypair.
        public_exponent: The public exponent.
    """
    modulus: int
    public_exponent: int


class PrivateKeyParams(typing.NamedTuple):
    """Private key parameters, including the CRT components.

    The derivable fields may be left unset (None) and are rebuilt from the primes and the private exponent by
    `ifkeys.derive.derive_private`.

    Attributes:
        public_exponent: The public exponent.
        private_exponent: The private exponent.
        prime_p: Private prime 1.
        prime_q: Private prime 2.
        modulus: The modulus of the keypair.
        crt_exponent_p: CRT component dmp1.
        crt_exponent_q: CRT component dmq1.
        crt_coefficient: CRT component iqmp.
    """
    public_exponent: int
    private_exponent: int
    prime_p: int
    prime_q: int
    modulus: int | None = None
    crt_exponent_p: int | None = None
    crt_exponent_q: int | None = None
    crt_coefficient: int | None = None

    @property
    def public(self) -> PublicKeyParams:
        """The matching public parameters."""
        return PublicKeyParams(self.modulus, self.public_exponent)

    def missing(self) -> list[str]:
        """Names of the derivable fields which are still unset."""
        return [name for name in DERIVABLE_FIELDS if getattr(self, name) is None]
