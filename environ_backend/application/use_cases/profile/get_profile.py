from ....domain.repositories.user_repository import UserRepository
from ...dto.profile_dto import ProfileResponse


class GetProfileUseCase:
    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> ProfileResponse:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise ValueError("User not found")
        return ProfileResponse(full_name=user.full_name, email=user.email, city=user.city)
