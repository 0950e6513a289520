"""Use case for soft-deleting a user."""

import logging
from dataclasses import dataclass

from ....domain.exceptions import (
    RepositoryError,
    UserNotFoundError,
    UserPersistenceError,
)
from ....domain.repositories import UserRepository
from ....domain.value_objects import UserId

OPERATION = "[DELETE_USER_USE_CASE]"


@dataclass(frozen=True)
class DeleteUserCommand:
    """Input for delete user use case."""

    id: UserId
    deleted_by: UserId


class DeleteUserUseCase:
    """Use case for soft-deleting a user.

    The user row is kept and flagged as deleted, which hides it from every
    repository read path.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize delete user use case.

        Args:
            user_repository: User repository
            logger: Logger receiving the use case events
        """
        self._user_repository = user_repository
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, command: DeleteUserCommand) -> None:
        """Execute delete user use case.

        Args:
            command: Target user ID and the acting user

        Raises:
            UserNotFoundError: If no live user has the given ID
            UserPersistenceError: If the repository fails to save the user
        """
        existing = await self._user_repository.find_by_id(command.id)
        if existing is None:
            self._logger.warning("%s User with id %s not found", OPERATION, command.id)
            raise UserNotFoundError(str(command.id), OPERATION)

        deleted = existing.with_deleted(deleted_by=command.deleted_by)

        try:
            await self._user_repository.save(deleted)
        except RepositoryError as e:
            self._logger.error("%s Failed to delete user: %s", OPERATION, existing.name)
            raise UserPersistenceError(
                OPERATION, f"Failed to delete user: {existing.name}"
            ) from e

        self._logger.debug("%s User deleted: %s", OPERATION, existing.name)
