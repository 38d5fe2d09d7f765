# reviewlens/utils/identity.py
"""Caller identity forwarded by the upstream auth gateway.

Authentication itself happens before requests reach this service; the
gateway passes the verified user id and role as headers.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Header

from reviewlens.messages.auth_messages import AUTHENTICATION_REQUIRED
from reviewlens.utils.exceptions import UnauthorizedError

ROLES = ("user", "restaurant-owner", "admin")


@dataclass(frozen=True)
class Caller:
    user_id: str
    role: str = "user"

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"


def get_optional_caller(
    x_user_id: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None),
) -> Optional[Caller]:
    if not x_user_id:
        return None
    role = x_user_role if x_user_role in ROLES else "user"
    return Caller(user_id=x_user_id, role=role)


def get_caller(
    x_user_id: Optional[str] = Header(default=None),
    x_user_role: Optional[str] = Header(default=None),
) -> Caller:
    caller = get_optional_caller(x_user_id, x_user_role)
    if caller is None:
        raise UnauthorizedError(code="AUTHENTICATION_REQUIRED", message=AUTHENTICATION_REQUIRED)
    return caller
