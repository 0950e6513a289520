"""Use case for getting a user by ID."""

import logging
from dataclasses import dataclass

from ....domain.entities import User
from ....domain.exceptions import RepositoryError, UserPersistenceError
from ....domain.repositories import UserRepository
from ....domain.value_objects import UserId

OPERATION = "[GET_BY_ID_USER_USE_CASE]"


@dataclass(frozen=True)
class GetUserByIdQuery:
    """Input for get user by ID use case."""

    id: UserId


class GetUserByIdUseCase:
    """Use case for getting a user by ID."""

    def __init__(
        self,
        user_repository: UserRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize get user by ID use case.

        Args:
            user_repository: User repository
            logger: Logger receiving the use case events
        """
        self._user_repository = user_repository
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, query: GetUserByIdQuery) -> User | None:
        """Execute get user by ID use case.

        Args:
            query: The user ID to look up

        Returns:
            The user, or None when no live user has the ID

        Raises:
            UserPersistenceError: If the repository fails to read
        """
        try:
            user = await self._user_repository.find_by_id(query.id)
        except RepositoryError as e:
            self._logger.error("%s Failed to find user with id %s", OPERATION, query.id)
            raise UserPersistenceError(
                OPERATION, f"Failed to find user with id {query.id}"
            ) from e

        if user is None:
            self._logger.debug("%s User not found with id: %s", OPERATION, query.id)
        else:
            self._logger.debug(
                "%s User found - name: [%s] | email: [%s]",
                OPERATION,
                user.name,
                user.email,
            )
        return user
