"""Use case for listing users page by page."""

import logging
from dataclasses import dataclass

from ....domain.entities import User
from ....domain.repositories import UserRepository
from ....domain.value_objects import Paged

OPERATION = "[GET_ALL_USER_USE_CASE]"


@dataclass(frozen=True)
class GetAllUsersQuery:
    """Input for get all users use case."""

    page: int = 0
    page_size: int = 10

    def __post_init__(self) -> None:
        """Validate paging parameters."""
        if self.page < 0:
            raise ValueError("page must be greater than or equal to 0")
        if self.page_size < 1:
            raise ValueError("page_size must be greater than or equal to 1")


class GetAllUsersUseCase:
    """Use case for listing users page by page."""

    def __init__(
        self,
        user_repository: UserRepository,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize get all users use case.

        Args:
            user_repository: User repository
            logger: Logger receiving the use case events
        """
        self._user_repository = user_repository
        self._logger = logger or logging.getLogger(__name__)

    async def execute(self, query: GetAllUsersQuery) -> Paged[User]:
        """Execute get all users use case.

        Args:
            query: Page index and page size

        Returns:
            The page exactly as computed by the repository
        """
        paged = await self._user_repository.find_paged(
            page=query.page, page_size=query.page_size
        )

        if paged.items:
            self._logger.debug(
                "%s Found [%d] user(s) in the database.", OPERATION, paged.total_items
            )
        else:
            self._logger.debug("%s No users found in the database.", OPERATION)

        return paged
