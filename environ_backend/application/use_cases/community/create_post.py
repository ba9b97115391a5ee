# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.community import Post
from ....domain.repositories.post_repository import PostRepository
from ....domain.repositories.user_repository import UserRepository
from ....infrastructure.notifications.notification_service import POST_CREATED, NotificationService
from ....utils.datetime_utils import utc_now
from ...dto.community_dto import PostCreateRequest, PostResponse
from ...services.reward_service import RewardService


class CreatePostUseCase:
    """Share a post on the community feed; enough posts unlock Community Star"""

    def __init__(
        self,
        post_repository: PostRepository,
        user_repository: UserRepository,
        reward_service: RewardService,
        notification_service: Optional[NotificationService] = None,
    ) -> None:
        self.post_repository = post_repository
        self.user_repository = user_repository
        self.reward_service = reward_service
        self.notification_service = notification_service

    async def execute(self, user_id: str, request: PostCreateRequest) -> PostResponse:
        """
        Raises:
            ValueError: Blank content or unknown user
        """
        content = request.content.strip()
        if not content:
            raise ValueError("Post content cannot be empty")

        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")

        post = await self.post_repository.save(
            Post(
                id=None,
                user_id=user_id,
                author_name=user.full_name,
                content=content,
                created_at=utc_now(),
            )
        )

        posts_count = await self.post_repository.count_by_user(user_id)
        outcome = await self.reward_service.grant(user_id, posts_count=posts_count)

        response = PostResponse(
            id=post.id or "",
            user_id=post.user_id,
            author_name=post.author_name,
            content=post.content,
            created_at=post.created_at,
            new_badges=outcome.new_badges,
        )
        if self.notification_service is not None:
            await self.notification_service.broadcast(
                POST_CREATED, response.model_dump(mode="json", exclude={"new_badges"})
            )
        return response
