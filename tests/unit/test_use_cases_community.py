"""
Unit tests for community use cases (posts, challenges, referrals, stats)
and the eco-tips assistant.
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from environ_backend.application.dto.community_dto import (
    ChallengeProgressRequest,
    PostCreateRequest,
    ReferralCreateRequest,
)
from environ_backend.application.services.reward_service import RewardOutcome
from environ_backend.application.use_cases.community import (
    CreatePostUseCase,
    CreateReferralUseCase,
    GetCommunityStatsUseCase,
    JoinChallengeUseCase,
    ListChallengesUseCase,
    ListPostsUseCase,
    ListReferralsUseCase,
    RecordChallengeProgressUseCase,
)
from environ_backend.application.use_cases.eco_tips import GetEcoTipUseCase, GetRecommendationUseCase
from environ_backend.core.exceptions import DatabaseConnectionError, NotFoundError, TextGenerationError
from environ_backend.domain.gamification import COMMUNITY_STAR
from environ_backend.domain.models.community import Challenge, ChallengeParticipation, Post, Referral
from environ_backend.infrastructure.notifications.notification_service import (
    CHALLENGE_COMPLETED,
    POST_CREATED,
)


@pytest.fixture
def mock_reward_service(rules, make_user):
    service = MagicMock()
    service.rules = rules
    service.grant = AsyncMock(return_value=RewardOutcome(user=make_user(), points_awarded=0))
    return service


@pytest.fixture
def plastic_week():
    return Challenge(
        id="ch-1",
        title="Plastic-Free Week",
        description="Avoid single-use plastic for 7 days",
        target=7,
        unit="days",
        points_reward=30,
    )


def _participation(progress=0.0, completed=False):
    return ChallengeParticipation(
        id="p-1", challenge_id="ch-1", user_id="usr-1", progress=progress, completed=completed
    )


class TestCreatePostUseCase:
    @pytest.mark.asyncio
    async def test_fifth_post_reports_community_star(
        self, make_user, mock_reward_service, mock_notification_service
    ):
        post_repo, user_repo = AsyncMock(), AsyncMock()
        user_repo.find_by_id.return_value = make_user(full_name="Greta")

        async def _save(post):
            post.id = "post-5"
            return post

        post_repo.save.side_effect = _save
        post_repo.count_by_user.return_value = 5
        mock_reward_service.grant.return_value = RewardOutcome(
            user=make_user(badges=[COMMUNITY_STAR]), points_awarded=0, new_badges=[COMMUNITY_STAR]
        )

        use_case = CreatePostUseCase(post_repo, user_repo, mock_reward_service, mock_notification_service)
        result = await use_case.execute("usr-1", PostCreateRequest(content="  Composting is easy!  "))

        assert result.id == "post-5"
        assert result.author_name == "Greta"
        assert result.content == "Composting is easy!"
        assert result.new_badges == [COMMUNITY_STAR]
        mock_reward_service.grant.assert_awaited_once_with("usr-1", posts_count=5)
        assert mock_notification_service.broadcast.await_args.args[0] == POST_CREATED

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, mock_reward_service):
        post_repo = AsyncMock()
        use_case = CreatePostUseCase(post_repo, AsyncMock(), mock_reward_service)
        with pytest.raises(ValueError, match="empty"):
            await use_case.execute("usr-1", PostCreateRequest(content="   "))
        post_repo.save.assert_not_called()


class TestListPostsUseCase:
    @pytest.mark.asyncio
    async def test_transient_error_is_retried(self, monkeypatch):
        monkeypatch.setattr("environ_backend.utils.retry_utils.asyncio.sleep", AsyncMock())
        post_repo = AsyncMock()
        post_repo.find_recent.side_effect = [
            DatabaseConnectionError("reconnecting"),
            [Post(id="p1", user_id="usr-2", author_name="Sam", content="Hi")],
        ]

        posts = await ListPostsUseCase(post_repo).execute(limit=10)

        assert [p.id for p in posts] == ["p1"]
        assert post_repo.find_recent.await_count == 2

    @pytest.mark.asyncio
    async def test_gives_up_after_retries(self, monkeypatch):
        monkeypatch.setattr("environ_backend.utils.retry_utils.asyncio.sleep", AsyncMock())
        post_repo = AsyncMock()
        post_repo.find_recent.side_effect = DatabaseConnectionError("down")

        with pytest.raises(DatabaseConnectionError):
            await ListPostsUseCase(post_repo).execute()
        assert post_repo.find_recent.await_count == 4


class TestChallenges:
    @pytest.mark.asyncio
    async def test_list_marks_joined(self, plastic_week):
        repo = AsyncMock()
        compost = Challenge(id="ch-2", title="Compost Starter", description="Start a compost bin", target=1)
        repo.list_active.return_value = [plastic_week, compost]
        repo.list_participations.return_value = [_participation(progress=2)]

        result = await ListChallengesUseCase(repo).execute("usr-1")

        assert [(c.id, c.joined, c.progress) for c in result] == [("ch-1", True, 2), ("ch-2", False, 0)]

    @pytest.mark.asyncio
    async def test_join_unknown_challenge(self):
        repo = AsyncMock()
        repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await JoinChallengeUseCase(repo).execute("usr-1", "nope")

    @pytest.mark.asyncio
    async def test_join(self, plastic_week):
        repo = AsyncMock()
        repo.find_by_id.return_value = plastic_week
        repo.join.return_value = _participation()

        result = await JoinChallengeUseCase(repo).execute("usr-1", "ch-1")

        repo.join.assert_awaited_once_with("ch-1", "usr-1")
        assert result.joined is True
        assert result.completed is False


class TestRecordChallengeProgress:
    @pytest.fixture
    def repo(self, plastic_week):
        repo = AsyncMock()
        repo.find_by_id.return_value = plastic_week
        repo.find_participation.return_value = _participation(progress=3)
        return repo

    @pytest.mark.asyncio
    async def test_partial_progress_has_no_reward(self, repo, mock_reward_service):
        repo.add_progress.return_value = _participation(progress=5)

        result = await RecordChallengeProgressUseCase(repo, mock_reward_service).execute(
            "usr-1", "ch-1", ChallengeProgressRequest(amount=2)
        )

        repo.add_progress.assert_awaited_once_with("ch-1", "usr-1", 2, 7)
        assert result.challenge.progress == 5
        assert result.points_awarded == 0
        mock_reward_service.grant.assert_not_called()

    @pytest.mark.asyncio
    async def test_completion_grants_reward_once(
        self, repo, mock_reward_service, make_user, mock_notification_service
    ):
        repo.add_progress.return_value = _participation(progress=7, completed=True)
        mock_reward_service.grant.return_value = RewardOutcome(
            user=make_user(points=30, level=3, badges=["Plastic Buster"]),
            points_awarded=30,
            level_up=True,
            new_badges=["Plastic Buster"],
        )

        result = await RecordChallengeProgressUseCase(
            repo, mock_reward_service, mock_notification_service
        ).execute("usr-1", "ch-1", ChallengeProgressRequest(amount=10))

        mock_reward_service.grant.assert_awaited_once_with(
            "usr-1", points=30, extra_badges=["Plastic Buster"], challenge_level=3
        )
        assert result.challenge.completed is True
        assert result.points_awarded == 30
        assert result.level == 3
        assert result.level_up is True
        assert result.new_badges == ["Plastic Buster"]
        assert mock_notification_service.notify_user.await_args.args[1] == CHALLENGE_COMPLETED

    @pytest.mark.asyncio
    async def test_not_joined(self, repo, mock_reward_service):
        repo.find_participation.return_value = None
        with pytest.raises(ValueError, match="not joined"):
            await RecordChallengeProgressUseCase(repo, mock_reward_service).execute(
                "usr-1", "ch-1", ChallengeProgressRequest(amount=1)
            )

    @pytest.mark.asyncio
    async def test_already_completed(self, repo, mock_reward_service):
        repo.find_participation.return_value = _participation(progress=7, completed=True)
        with pytest.raises(ValueError, match="already completed"):
            await RecordChallengeProgressUseCase(repo, mock_reward_service).execute(
                "usr-1", "ch-1", ChallengeProgressRequest(amount=1)
            )
        repo.add_progress.assert_not_called()

    @pytest.mark.asyncio
    async def test_completed_concurrently(self, repo, mock_reward_service):
        repo.add_progress.return_value = None
        with pytest.raises(ValueError, match="already completed"):
            await RecordChallengeProgressUseCase(repo, mock_reward_service).execute(
                "usr-1", "ch-1", ChallengeProgressRequest(amount=1)
            )
        mock_reward_service.grant.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_challenge(self, repo, mock_reward_service):
        repo.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            await RecordChallengeProgressUseCase(repo, mock_reward_service).execute(
                "usr-1", "missing", ChallengeProgressRequest(amount=1)
            )


class TestReferrals:
    @pytest.mark.asyncio
    async def test_create(self, make_user):
        referral_repo, user_repo = AsyncMock(), AsyncMock()
        user_repo.find_by_id.return_value = make_user()
        referral_repo.find.return_value = None
        referral_repo.save.side_effect = lambda r: Referral(
            id="ref-1", referrer_id=r.referrer_id, referred_email=r.referred_email, created_at=r.created_at
        )

        result = await CreateReferralUseCase(referral_repo, user_repo).execute(
            "usr-1", ReferralCreateRequest(email="Friend@Example.com")
        )

        assert result.id == "ref-1"
        assert result.referred_email == "friend@example.com"

    @pytest.mark.asyncio
    async def test_self_referral(self, make_user):
        referral_repo, user_repo = AsyncMock(), AsyncMock()
        user_repo.find_by_id.return_value = make_user(email="me@example.com")
        with pytest.raises(ValueError, match="yourself"):
            await CreateReferralUseCase(referral_repo, user_repo).execute(
                "usr-1", ReferralCreateRequest(email="ME@example.com")
            )
        referral_repo.save.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate(self, make_user):
        referral_repo, user_repo = AsyncMock(), AsyncMock()
        user_repo.find_by_id.return_value = make_user()
        referral_repo.find.return_value = Referral(id="ref-1", referrer_id="usr-1", referred_email="a@b.com")
        with pytest.raises(ValueError, match="already referred"):
            await CreateReferralUseCase(referral_repo, user_repo).execute(
                "usr-1", ReferralCreateRequest(email="a@b.com")
            )

    @pytest.mark.asyncio
    async def test_list_with_count(self):
        referral_repo = AsyncMock()
        referral_repo.list_by_referrer.return_value = [
            Referral(id="r1", referrer_id="usr-1", referred_email="a@b.com"),
            Referral(id="r2", referrer_id="usr-1", referred_email="c@d.com"),
        ]
        result = await ListReferralsUseCase(referral_repo).execute("usr-1")
        assert result.count == 2
        assert [r.referred_email for r in result.referrals] == ["a@b.com", "c@d.com"]


class TestCommunityStats:
    @pytest.mark.asyncio
    async def test_counts(self):
        challenge_repo, post_repo, referral_repo = AsyncMock(), AsyncMock(), AsyncMock()
        challenge_repo.count_completed.return_value = 2
        post_repo.count_by_user.return_value = 4
        referral_repo.count_by_referrer.return_value = 1

        stats = await GetCommunityStatsUseCase(challenge_repo, post_repo, referral_repo).execute("usr-1")

        assert (stats.challenges_completed, stats.posts_shared, stats.referrals_count) == (2, 4, 1)


class TestEcoTips:
    @pytest.mark.asyncio
    async def test_reply_from_gemini(self):
        gemini = AsyncMock()
        gemini.generate_text.return_value = "  Carry a reusable bag.  "

        reply = await GetEcoTipUseCase(gemini).execute("How can I reduce waste?")

        assert reply == "Carry a reusable bag."
        prompt = gemini.generate_text.await_args.args[0]
        assert "How can I reduce waste?" in prompt
        assert "under 100 words" in prompt

    @pytest.mark.asyncio
    async def test_blank_message(self):
        gemini = AsyncMock()
        with pytest.raises(ValueError, match="Please enter a message."):
            await GetEcoTipUseCase(gemini).execute("   ")
        gemini.generate_text.assert_not_called()

    @pytest.mark.asyncio
    async def test_vendor_error_propagates(self):
        gemini = AsyncMock()
        gemini.generate_text.side_effect = TextGenerationError("quota")
        with pytest.raises(TextGenerationError):
            await GetEcoTipUseCase(gemini).execute("tips?")

    @pytest.mark.asyncio
    async def test_recommendation(self):
        assert await GetRecommendationUseCase().execute("Yes") == "Great! Try composting next."
        with pytest.raises(ValueError):
            await GetRecommendationUseCase().execute("")
