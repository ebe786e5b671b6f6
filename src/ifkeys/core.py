"""The computational cores built by the key load hooks.

A core holds the numbers a key operation needs and performs the bare modular exponentiation. Padding schemes and
message encoding are not handled here.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from ifkeys.params import PrivateKeyParams


class IFCore:
    """Core for a single exponent, as used by public keys.

    Attributes:
        mod: The modulus of the keypair.
        expo: The exponent of the key, whether private or public.
        bsize: Length of the modulus in bytes.
    """

    def __init__(self, mod: int, expo: int) -> None:
        self.mod = mod
        self.expo = expo
        self.bsize = (self.mod.bit_length() + 7) // 8

    def c_rsa(self, message: int) -> int:
        """Performs the core RSA operation.

        Args:
            message: The int-marshalled message representative.

        Returns:
            The message representative raised to the exponent.

        Raises:
            ValueError: If the message is out of range for the current key.
        """
        if not 0 <= message < self.mod:
            raise ValueError("Message representative must be in range [0, mod-1]")
        return pow(message, self.expo, self.mod)


class IFPrivateCore(IFCore):
    """Core for a private key, accelerated with CRT when all CRT components are available.

    Attributes:
        pub: The core of the matching public key.
    """

    def __init__(self, params: PrivateKeyParams) -> None:
        super().__init__(params.modulus, params.private_exponent)
        self.pub = IFCore(params.modulus, params.public_exponent)
        self.p = params.prime_p
        self.q = params.prime_q
        self.exp1 = params.crt_exponent_p
        self.exp2 = params.crt_exponent_q
        self.coeff = params.crt_coefficient
        self.crt = not params.missing()

    def c_rsa(self, message: int) -> int:
        """Performs the core RSA operation with the private exponent.

        Args:
            message: The int-marshalled message representative.

        Returns:
            The message representative raised to the private exponent.

        Raises:
            ValueError: If the message is out of range for the current key.
        """
        if not self.crt:
            return super().c_rsa(message)
        if not 0 <= message < self.mod:
            raise ValueError("Message representative must be in range [0, mod-1]")
        m_1 = pow(message, self.exp1, self.p)
        m_2 = pow(message, self.exp2, self.q)
        h = ((m_1 - m_2) * self.coeff) % self.p
        return m_2 + self.q * h
