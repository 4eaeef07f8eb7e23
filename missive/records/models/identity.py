"""Caller identity type."""

from typing import NewType

IdentityKey = NewType("IdentityKey", str)
"""Opaque caller token, supplied by the execution environment.

Never generated locally. Used both as the record key and as the
owner identity.
"""
