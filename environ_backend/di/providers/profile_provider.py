from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.profile import GetProfileUseCase, UpdateProfileUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ProfileProvider:
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetProfileUseCase,
            lambda: GetProfileUseCase(user_repository=container.get(UserRepository))
        )
        container.register_factory(
            UpdateProfileUseCase,
            lambda: UpdateProfileUseCase(user_repository=container.get(UserRepository))
        )
