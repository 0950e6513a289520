"""Application use cases."""

from .users import (
    CreateUserCommand,
    CreateUserUseCase,
    DeleteUserCommand,
    DeleteUserUseCase,
    GetAllUsersQuery,
    GetAllUsersUseCase,
    GetUserByIdQuery,
    GetUserByIdUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
)

__all__ = [
    "CreateUserCommand",
    "CreateUserUseCase",
    "UpdateUserCommand",
    "UpdateUserUseCase",
    "DeleteUserCommand",
    "DeleteUserUseCase",
    "GetUserByIdQuery",
    "GetUserByIdUseCase",
    "GetAllUsersQuery",
    "GetAllUsersUseCase",
]
