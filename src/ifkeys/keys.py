"""Loaded key objects and the hooks that load them.

Populating a key runs its load hook: private keys first get their omitted fields derived, then the computational
core is built and the key is checked at the configured level. A key failing that check is never handed out.

Typical usage example:

    set_load_check("strong")
    pk = IFPrivateKey.from_pem(text)
    pub = pk.public_key()
    der = pub.to_der()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import warnings

from pyasn1_modules import rfc8017

from ifkeys import codec
from ifkeys.core import IFCore
from ifkeys.core import IFPrivateCore
from ifkeys.derive import derive_private
from ifkeys.errors import DecodingError
from ifkeys.errors import KeyLoadError
from ifkeys.params import PrivateKeyParams
from ifkeys.params import PublicKeyParams
from ifkeys.validation import validate

LOAD_CHECKS = ("none", "weak", "strong")
ACCEPTED_OIDS = (rfc8017.rsaEncryption,)

_LOAD_CHECK: str = "weak"
# Passed as `check` by keys built from an already loaded key.
_TRUSTED = object()
_log = logging.getLogger(__name__)


def set_load_check(level: str) -> None:
    """Sets the check run on every key load that does not request its own.

    Args:
        level: One of "none", "weak" or "strong".

    Raises:
        ValueError: If the level is unknown.
    """
    global _LOAD_CHECK
    if level not in LOAD_CHECKS:
        raise ValueError(f"Unknown load check {level!r}, expected one of {', '.join(LOAD_CHECKS)}")
    if level == "none":
        warnings.warn("Key load checks disabled! Broken keys will be accepted.", RuntimeWarning)
    _LOAD_CHECK = level


def get_load_check() -> str:
    """Returns the check currently run on key loads."""
    return _LOAD_CHECK


def _run_load_check(key: "IFPublicKey | IFPrivateKey", check: str | None) -> None:
    if check is _TRUSTED:
        return
    level = _LOAD_CHECK if check is None else check
    if level not in LOAD_CHECKS:
        raise ValueError(f"Unknown load check {level!r}, expected one of {', '.join(LOAD_CHECKS)}")
    if level == "none":
        if check is not None:
            warnings.warn(f"Load check skipped for {type(key).__name__}! Broken keys will be accepted.",
                          RuntimeWarning, stacklevel=3)
        return
    kind = type(key).__name__
    bits = key.core.mod.bit_length()
    if not validate(key, strong=level == "strong"):
        _log.warning("Rejected %d bit %s on %s load check", bits, kind, level)
        raise KeyLoadError(f"{kind} failed the {level} load check")
    _log.debug("Loaded %d bit %s after %s check", bits, kind, level)


def _check_algorithm(oid) -> None:
    if oid not in ACCEPTED_OIDS:
        raise DecodingError(f"Key algorithm {oid} not supported.")


def _pem_subtype(text: str, choices: tuple[str, ...]) -> str:
    stripped = text.lstrip()
    for subtype in choices:
        if stripped.startswith(codec.PEM_TYPES[subtype][0]):
            return subtype
    raise DecodingError(f"PEM text is none of {', '.join(choices)}")


class IFPublicKey:
    """A loaded public key.

    Attributes:
        params: The public key parameters.
        core: The computational core of the key.
    """

    def __init__(self, params: PublicKeyParams, check: str | None = None) -> None:
        """Runs the public key load hook.

        Args:
            params: The populated public key parameters.
            check: The load check to run, overriding `get_load_check()`. Public keys have no strong check, so
                "strong" runs the weak one. Passing "none" warns with a RuntimeWarning.

        Raises:
            KeyLoadError: If the key fails the load check.
        """
        self.params = params
        self.core = IFCore(params.modulus, params.public_exponent)
        _run_load_check(self, check)

    @classmethod
    def from_key_bits(cls, data: bytes, check: str | None = None) -> "IFPublicKey":
        """Loads a public key from its PKCS#1 key bits.

        Raises:
            DecodingError: If the key bits are malformed.
            KeyLoadError: If the key fails the load check.
        """
        return cls(codec.decode_public(data), check)

    @classmethod
    def from_der(cls, data: bytes, check: str | None = None) -> "IFPublicKey":
        """Loads a public key from a DER SubjectPublicKeyInfo.

        Raises:
            DecodingError: If the envelope or the key bits are malformed, or name another algorithm.
            KeyLoadError: If the key fails the load check.
        """
        oid, bits = codec.unwrap_public_key_info(data)
        _check_algorithm(oid)
        return cls.from_key_bits(bits, check)

    @classmethod
    def from_pem(cls, text: str, check: str | None = None) -> "IFPublicKey":
        """Loads a public key from PEM text, either SubjectPublicKeyInfo or PKCS#1."""
        subtype = _pem_subtype(text, ("SPKI", "PKCS1_PUB"))
        data = codec.pem_dearmor(text, subtype)
        if subtype == "SPKI":
            return cls.from_der(data, check)
        return cls.from_key_bits(data, check)

    def key_bits(self) -> bytes:
        """Encodes the bare PKCS#1 public key bits, the payload of the SubjectPublicKeyInfo bit string."""
        return codec.encode_public(self.params)

    def algorithm_id(self) -> bytes:
        """Encodes the AlgorithmIdentifier naming this key's scheme, with NULL parameters."""
        return codec.encode_public_algorithm_id()

    def to_der(self) -> bytes:
        """Encodes the key as a DER SubjectPublicKeyInfo."""
        return codec.wrap_public_key_info(self.params)

    def to_pem(self, subtype: str = "SPKI") -> str:
        """Encodes the key as PEM text.

        Args:
            subtype: "SPKI" for a SubjectPublicKeyInfo, "PKCS1_PUB" for bare key bits.
        """
        if subtype == "SPKI":
            return codec.pem_armor(self.to_der(), subtype)
        if subtype == "PKCS1_PUB":
            return codec.pem_armor(self.key_bits(), subtype)
        raise ValueError(f"Unsupported public key PEM type {subtype}")

    def check_key(self, strong: bool = False) -> bool:
        """Checks the key for consistency.

        Args:
            strong: Run the strong check. Public keys have none, so this changes nothing.

        Returns:
            Whether the key passed, never raising on an inconsistent key.
        """
        return validate(self.params, strong)


class IFPrivateKey:
    """A loaded private key.

    Attributes:
        params: The private key parameters, derivable fields filled in.
        core: The computational core of the key.
    """

    def __init__(self, params: PrivateKeyParams, check: str | None = None) -> None:
        """Runs the private key load hook.

        Args:
            params: The populated private key parameters. Unset derivable fields are computed.
            check: The load check to run, overriding `get_load_check()`. Passing "none" warns with a RuntimeWarning.

        Raises:
            KeyLoadError: If the key fails the load check.
        """
        self.params = derive_private(params)
        self.core = IFPrivateCore(self.params)
        _run_load_check(self, check)

    @classmethod
    def from_der(cls, data: bytes, check: str | None = None) -> "IFPrivateKey":
        """Loads a private key from its DER PKCS#1 encoding.

        Raises:
            DecodingError: If the encoding is malformed or of an unsupported version.
            KeyLoadError: If the key fails the load check.
        """
        return cls(codec.decode_private(data), check)

    @classmethod
    def from_pkcs8(cls, data: bytes, check: str | None = None) -> "IFPrivateKey":
        """Loads a private key from a DER PKCS#8 PrivateKeyInfo.

        Raises:
            DecodingError: If the envelope or payload are malformed, or name another algorithm.
            KeyLoadError: If the key fails the load check.
        """
        oid, payload = codec.unwrap_private_key_info(data)
        _check_algorithm(oid)
        return cls.from_der(payload, check)

    @classmethod
    def from_pem(cls, text: str, check: str | None = None) -> "IFPrivateKey":
        """Loads a private key from PEM text, either PKCS#8 or PKCS#1."""
        subtype = _pem_subtype(text, ("PKCS8", "PKCS1_PRIV"))
        data = codec.pem_dearmor(text, subtype)
        if subtype == "PKCS8":
            return cls.from_pkcs8(data, check)
        return cls.from_der(data, check)

    def to_der(self) -> bytes:
        """Encodes the key as DER PKCS#1."""
        return codec.encode_private(self.params)

    def to_pkcs8(self) -> bytes:
        """Encodes the key as a DER PKCS#8 PrivateKeyInfo."""
        return codec.wrap_private_key_info(self.params)

    def to_pem(self, subtype: str = "PKCS8") -> str:
        """Encodes the key as PEM text.

        Args:
            subtype: "PKCS8" for a PrivateKeyInfo, "PKCS1_PRIV" for the bare PKCS#1 payload.
        """
        if subtype == "PKCS8":
            return codec.pem_armor(self.to_pkcs8(), subtype)
        if subtype == "PKCS1_PRIV":
            return codec.pem_armor(self.to_der(), subtype)
        raise ValueError(f"Unsupported private key PEM type {subtype}")

    def public_key(self) -> IFPublicKey:
        """The matching public key, not checked again on load."""
        return IFPublicKey(self.params.public, check=_TRUSTED)

    def check_key(self, strong: bool = False) -> bool:
        """Checks the key for consistency.

        Args:
            strong: Also check the CRT fields against the primes and test both primes for primality.

        Returns:
            Whether the key passed, never raising on an inconsistent key.
        """
        return validate(self.params, strong)

