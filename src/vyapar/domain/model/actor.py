"""Explicit acting-user context passed into core operations."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(Enum):
    RETAILER = "retailer"
    WHOLESALER = "wholesaler"
    ADMIN = "admin"


@dataclass(frozen=True)
class Actor:
    user_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN

    def __str__(self) -> str:
        return f"{self.role.value}:{self.user_id}"
