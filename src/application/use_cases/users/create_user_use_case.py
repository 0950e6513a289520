"""Create user use case implementation."""

import logging
from dataclasses import dataclass
from datetime import date

from ....domain.entities import User
from ....domain.exceptions import RepositoryError, UserPersistenceError
from ....domain.repositories import UserRepository
from ....domain.value_objects import UserId, UserRole

OPERATION = "[CREATE_USER_USE_CASE]"


@dataclass(frozen=True)
class CreateUserCommand:
    """Create user use case input."""

    name: str
    email: str
    password: str
    birth_date: date
    phone: str
    role: int
    created_by: UserId


class CreateUserUseCase:
    """Use case for registering a new user."""

    def __init__(
        self,
        user_repository: UserRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize create user use case.

        Args:
            user_repository: User repository
            logger: Logger receiving the use case events
        """
        self._user_repository = user_repository
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, command: CreateUserCommand) -> User:
        """Execute create user use case.

        Args:
            command: Creation data and the acting user

        Returns:
            The user as persisted by the repository

        Raises:
            UnknownUserRoleError: If the role code is not a known role
            UserPersistenceError: If the repository fails to save the user
        """
        # Validated before any repository access
        role = UserRole.from_code(command.role)

        user = User.create(
            name=command.name,
            email=command.email,
            password=command.password,
            birth_date=command.birth_date,
            phone=command.phone,
            role=role,
            created_by=command.created_by,
        )

        try:
            saved = await self._user_repository.save(user)
        except RepositoryError as e:
            self._logger.error("%s Failed to create user: %s", OPERATION, command.name)
            raise UserPersistenceError(
                OPERATION, f"Failed to create user: {command.name}"
            ) from e

        self._logger.debug("%s User created with name: %s", OPERATION, saved.name)
        return saved
