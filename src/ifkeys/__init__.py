"""Integer-factorization (RSA) key encoding, decoding and validation.

Provides DER codecs for PKCS#1 public and private keys and their X.509 SubjectPublicKeyInfo / PKCS#8 envelopes,
reconstruction of omitted private key fields, and weak and strong consistency checks. Keys are checked as they are
loaded, at a configurable level.

Typical usage example:

    pk = IFPrivateKey.from_pem(text)
    ok = validate(pk, strong=True)
    der = pk.public_key().to_der()
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from ifkeys.codec import decode_private
from ifkeys.codec import decode_public
from ifkeys.codec import encode_private
from ifkeys.codec import encode_public
from ifkeys.derive import derive_private
from ifkeys.errors import DecodingError
from ifkeys.errors import IFKeyError
from ifkeys.errors import KeyLoadError
from ifkeys.keys import get_load_check
from ifkeys.keys import IFPrivateKey
from ifkeys.keys import IFPublicKey
from ifkeys.keys import set_load_check
from ifkeys.numtheory import check_prime
from ifkeys.params import PrivateKeyParams
from ifkeys.params import PublicKeyParams
from ifkeys.validation import validate

__version__ = "0.0.1"
__all__ = [
    "IFPrivateKey",
    "IFPublicKey",
    "PrivateKeyParams",
    "PublicKeyParams",
    "DecodingError",
    "IFKeyError",
    "KeyLoadError",
    "decode_private",
    "decode_public",
    "encode_private",
    "encode_public",
    "derive_private",
    "validate",
    "check_prime",
    "get_load_check",
    "set_load_check",
]
