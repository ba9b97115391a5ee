# Standard library imports
from typing import List

# Local application imports
from ....core.exceptions import DatabaseConnectionError
from ....domain.models.community import Post
from ....domain.repositories.post_repository import PostRepository
from ....utils.retry_utils import async_retry_on_exception
from ...dto.community_dto import PostResponse

MAX_FEED_LIMIT = 100


class ListPostsUseCase:
    """Community feed, newest first. Transient database errors are retried."""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    @async_retry_on_exception(max_retries=3, initial_delay=0.5, max_delay=5.0, exceptions=(DatabaseConnectionError,))
    async def _fetch(self, limit: int) -> List[Post]:
        return await self.post_repository.find_recent(limit)

    async def execute(self, limit: int = 20) -> List[PostResponse]:
        if limit < 1:
            raise ValueError("Limit must be at least 1")
        posts = await self._fetch(min(limit, MAX_FEED_LIMIT))
        return [
            PostResponse(
                id=post.id or "",
                user_id=post.user_id,
                author_name=post.author_name,
                content=post.content,
                created_at=post.created_at,
            )
            for post in posts
        ]
