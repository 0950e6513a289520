"""User use cases."""

from .create_user_use_case import CreateUserCommand, CreateUserUseCase
from .delete_user_use_case import DeleteUserCommand, DeleteUserUseCase
from .get_all_users_use_case import GetAllUsersQuery, GetAllUsersUseCase
from .get_user_by_id_use_case import GetUserByIdQuery, GetUserByIdUseCase
from .update_user_use_case import UpdateUserCommand, UpdateUserUseCase

__all__ = [
    "CreateUserCommand",
    "CreateUserUseCase",
    "DeleteUserCommand",
    "DeleteUserUseCase",
    "GetAllUsersQuery",
    "GetAllUsersUseCase",
    "GetUserByIdQuery",
    "GetUserByIdUseCase",
    "UpdateUserCommand",
    "UpdateUserUseCase",
]
