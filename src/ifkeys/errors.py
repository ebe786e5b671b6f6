"""Exceptions raised while decoding and loading keys.

Validation failures are not exceptions, checks return a boolean verdict. Only the load hooks turn a failed check
into a `KeyLoadError`.
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class IFKeyError(IOError):
    """Base class for key import failures."""


class DecodingError(IFKeyError):
    """The encoding does not match the expected structure.

    Raised for wrong element counts or types, unsupported versions, truncated input and trailing bytes.
    No key parameters are produced when this is raised.
    """


class KeyLoadError(IFKeyError):
    """A decoded key failed the validation run by its load hook."""
