# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Auth Resolver — Authorization header -> User.

Tokens are static, long-lived credentials; there is no session or TTL.
Failures always raise AuthenticationError, never fall back to an
anonymous identity.
"""

from __future__ import annotations

import logging
from typing import Optional

from tenant_hub.core.errors import AuthenticationError, AuthFailureReason
from tenant_hub.identity.directory import IdentityDirectory
from tenant_hub.protocols.schema import User

logger = logging.getLogger("hub.auth")

BEARER_SCHEME = "bearer"


def parse_bearer_token(header_value: Optional[str]) -> Optional[str]:
    """Return the token of a ``Bearer <token>`` header, or None if the shape is wrong."""
    if not header_value:
        return None
    parts = header_value.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]


class AuthResolver:
    def __init__(self, directory: IdentityDirectory) -> None:
        self._directory = directory

    def resolve(self, header_value: Optional[str]) -> User:
        token = parse_bearer_token(header_value)
        if token is None:
            raise AuthenticationError(AuthFailureReason.MISSING_OR_MALFORMED)

        user = self._directory.lookup(token)
        if user is None:
            logger.warning("Rejected unknown bearer token")
            raise AuthenticationError(AuthFailureReason.INVALID_TOKEN)
        return user
