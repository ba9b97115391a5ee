from ....domain.repositories.user_repository import UserRepository
from ...dto.profile_dto import ProfileResponse, ProfileUpdateRequest


class UpdateProfileUseCase:
    """Update name and/or city. Email cannot be changed here."""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str, request: ProfileUpdateRequest) -> ProfileResponse:
        """
        Raises:
            ValueError: Nothing to update, blank name, or unknown user
        """
        full_name = request.full_name.strip() if request.full_name is not None else None
        city = request.city.strip() if request.city is not None else None

        if full_name is None and city is None:
            raise ValueError("Nothing to update")
        if full_name is not None and len(full_name) < 2:
            raise ValueError("Full name must be at least 2 characters")

        user = await self.user_repository.update_profile(user_id, full_name=full_name, city=city)
        if user is None:
            raise ValueError("User not found")
        return ProfileResponse(full_name=user.full_name, email=user.email, city=user.city)
