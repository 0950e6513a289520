"""Use case for updating a user."""

import logging
from dataclasses import dataclass
from datetime import date

from ....domain.entities import User
from ....domain.exceptions import (
    RepositoryError,
    UserNotFoundError,
    UserPersistenceError,
)
from ....domain.repositories import UserRepository
from ....domain.value_objects import UserId

OPERATION = "[UPDATE_USER_USE_CASE]"


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input for update user use case."""

    id: UserId
    name: str
    email: str
    password: str
    birth_date: date
    phone: str
    updated_by: UserId


class UpdateUserUseCase:
    """Use case for updating a user.

    Only the name is applied from the command; email, password, birth date
    and phone are carried over from the stored user.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize update user use case.

        Args:
            user_repository: User repository
            logger: Logger receiving the use case events
        """
        self._user_repository = user_repository
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, command: UpdateUserCommand) -> User:
        """Execute update user use case.

        Args:
            command: Update data and the acting user

        Returns:
            The updated user as persisted by the repository

        Raises:
            UserNotFoundError: If no live user has the given ID
            UserPersistenceError: If the repository fails to save the user
        """
        existing = await self._user_repository.find_by_id(command.id)
        if existing is None:
            self._logger.warning("%s User with id %s not found", OPERATION, command.id)
            raise UserNotFoundError(str(command.id), OPERATION)

        updated = existing.with_name(command.name, updated_by=command.updated_by)

        try:
            saved = await self._user_repository.save(updated)
        except RepositoryError as e:
            self._logger.error("%s Failed to update user: %s", OPERATION, command.name)
            raise UserPersistenceError(
                OPERATION, f"Failed to update user: {command.name}"
            ) from e

        self._logger.debug(
            "%s User updated from [%s] to [%s]", OPERATION, existing.name, saved.name
        )
        return saved
