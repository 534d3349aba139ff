# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Identity Directory — Static bearer-token table.

Built once at startup (from the built-in seed users or a YAML file)
and passed by reference to the AuthResolver. The table is read-only
after construction.
"""

from __future__ import annotations

import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, Optional

import yaml
from pydantic import ValidationError

from tenant_hub.protocols.schema import Role, User

logger = logging.getLogger("hub.identity")

DEFAULT_USERS: tuple[User, ...] = (
    User(id="admin_a", tenant_id="company_a", role=Role.ADMIN, token="token_admin_a"),
    User(id="user_a", tenant_id="company_a", role=Role.MEMBER, token="token_user_a"),
    User(id="admin_b", tenant_id="company_b", role=Role.ADMIN, token="token_admin_b"),
)


class IdentityDirectory:
    """Immutable token -> User mapping."""

    def __init__(self, users: Iterable[User]) -> None:
        table: Dict[str, User] = {}
        for user in users:
            if user.token in table:
                raise ValueError(f"Duplicate token for user '{user.id}'")
            table[user.token] = user
        self._by_token = MappingProxyType(table)

    def lookup(self, token: str) -> Optional[User]:
        return self._by_token.get(token)

    def tenants(self) -> set[str]:
        return {u.tenant_id for u in self._by_token.values()}

    def __contains__(self, token: object) -> bool:
        return token in self._by_token

    def __iter__(self) -> Iterator[User]:
        return iter(self._by_token.values())

    def __len__(self) -> int:
        return len(self._by_token)

    def __repr__(self) -> str:
        return f"IdentityDirectory(users={len(self)}, tenants={sorted(self.tenants())})"

    @classmethod
    def default(cls) -> IdentityDirectory:
        return cls(DEFAULT_USERS)


def parse_identity_config(config: Any) -> IdentityDirectory:
    """
    Build a directory from a parsed YAML document.

    Expected shape:
        users:
          - {token: token_admin_a, id: admin_a, tenant_id: company_a, role: admin}
    """
    if not isinstance(config, dict) or not isinstance(config.get("users"), list):
        raise ValueError("Identity config must contain a 'users' list")

    users = []
    for i, entry in enumerate(config["users"]):
        try:
            users.append(User.model_validate(entry))
        except ValidationError as exc:
            raise ValueError(f"Invalid user entry #{i}: {exc.errors()}") from exc
    return IdentityDirectory(users)


def load_identity_from_string(yaml_content: str) -> IdentityDirectory:
    return parse_identity_config(yaml.safe_load(yaml_content))


def load_identity_from_yaml(path: str | Path) -> IdentityDirectory:
    """Load the token table from a YAML file."""
    with open(path, "r", encoding="utf-8") as f:
        config = yaml.safe_load(f)
    directory = parse_identity_config(config)
    logger.info("Loaded %d identities from %s", len(directory), path)
    return directory


def build_identity_directory(identity_file: Optional[str] = None) -> IdentityDirectory:
    """Directory from ``identity_file`` if given, else the built-in seed users."""
    if identity_file:
        return load_identity_from_yaml(identity_file)
    logger.info("No identity file configured, using %d built-in users", len(DEFAULT_USERS))
    return IdentityDirectory.default()
