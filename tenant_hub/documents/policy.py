# Copyright (c) 2026 TenantHub Contributors. All Rights Reserved.

"""
Access Control Policy — Pure visibility and delete decisions.

Rules, first match wins:
  1. other tenant          -> hidden (no role overrides this)
  2. admin                 -> visible
  3. access_level=tenant   -> visible
  4. private, own upload   -> visible
  5. otherwise             -> hidden

Delete requires admin AND visibility, i.e. an admin acting inside
their own tenant.
"""

from __future__ import annotations

from tenant_hub.protocols.schema import AccessLevel, Document, Role, User


def _has_tenant_wide_rights(role: Role) -> bool:
    """Admins see and delete everything in their tenant; members do not."""
    if role is Role.ADMIN:
        return True
    if role is Role.MEMBER:
        return False
    raise AssertionError(f"Unhandled role: {role!r}")


def is_visible(user: User, doc: Document) -> bool:
    if doc.tenant_id != user.tenant_id:
        return False
    if _has_tenant_wide_rights(user.role):
        return True
    if doc.access_level is AccessLevel.TENANT:
        return True
    if doc.access_level is AccessLevel.PRIVATE and doc.uploaded_by == user.id:
        return True
    return False


def may_delete(user: User) -> bool:
    """Role-only check, evaluated before any document lookup."""
    return _has_tenant_wide_rights(user.role)


def can_delete(user: User, doc: Document) -> bool:
    return may_delete(user) and is_visible(user, doc)
