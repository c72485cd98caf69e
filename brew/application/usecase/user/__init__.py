"""User use cases."""

from .assign_role import AssignRoleRequest, AssignRoleUseCase
from .common import UserItem
from .get_user import GetUserRequest, GetUserUseCase

__all__ = [
    "AssignRoleRequest",
    "AssignRoleUseCase",
    "GetUserRequest",
    "GetUserUseCase",
    "UserItem",
]
