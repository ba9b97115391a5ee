# Standard library imports
from typing import List

# External package imports
from fastapi import APIRouter, Depends, HTTPException, Query, status

# Local application imports
from ...application.dto.community_dto import (
    ChallengeProgressRequest,
    ChallengeProgressResponse,
    ChallengeResponse,
    CommunityStatsResponse,
    PostCreateRequest,
    PostResponse,
    ReferralCreateRequest,
    ReferralListResponse,
    ReferralResponse,
)
from ...application.dto.user_dto import UserResponse
from ...application.use_cases.community import (
    CreatePostUseCase,
    CreateReferralUseCase,
    GetCommunityStatsUseCase,
    JoinChallengeUseCase,
    ListChallengesUseCase,
    ListPostsUseCase,
    ListReferralsUseCase,
    RecordChallengeProgressUseCase,
)
from ...core.exceptions import DatabaseConnectionError, NotFoundError, get_user_message
from ...di.container import get_container
from .dependencies import get_current_user
from .errors import internal_error

router = APIRouter(tags=["community"])


# ---------------------------------------------------------------------------
# Posts
# ---------------------------------------------------------------------------

@router.post("/posts", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: PostCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> PostResponse:
    use_case = get_container().get(CreatePostUseCase)
    try:
        return await use_case.execute(current_user.id, request)
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))
    except RuntimeError as exception:
        raise internal_error(exception, "Sharing post")


@router.get("/posts", response_model=List[PostResponse])
async def list_posts(
    limit: int = Query(20, ge=1, le=100),
    current_user: UserResponse = Depends(get_current_user),
) -> List[PostResponse]:
    """Community feed, newest first"""
    use_case = get_container().get(ListPostsUseCase)
    try:
        return await use_case.execute(limit)
    except DatabaseConnectionError as exception:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=get_user_message(exception)
        )
    except RuntimeError as exception:
        raise internal_error(exception, "Loading posts")


# ---------------------------------------------------------------------------
# Challenges
# ---------------------------------------------------------------------------

@router.get("/challenges", response_model=List[ChallengeResponse])
async def list_challenges(current_user: UserResponse = Depends(get_current_user)) -> List[ChallengeResponse]:
    use_case = get_container().get(ListChallengesUseCase)
    try:
        return await use_case.execute(current_user.id)
    except RuntimeError as exception:
        raise internal_error(exception, "Loading challenges")


@router.post("/challenges/{challenge_id}/join", response_model=ChallengeResponse)
async def join_challenge(
    challenge_id: str,
    current_user: UserResponse = Depends(get_current_user),
) -> ChallengeResponse:
    """Join a challenge; joining twice is a no-op"""
    use_case = get_container().get(JoinChallengeUseCase)
    try:
        return await use_case.execute(current_user.id, challenge_id)
    except NotFoundError as exception:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    except RuntimeError as exception:
        raise internal_error(exception, "Joining challenge")


@router.post("/challenges/{challenge_id}/progress", response_model=ChallengeProgressResponse)
async def record_challenge_progress(
    challenge_id: str,
    request: ChallengeProgressRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ChallengeProgressResponse:
    """
    Add progress to a joined challenge

    Reaching the target completes the challenge and grants its reward once.
    """
    use_case = get_container().get(RecordChallengeProgressUseCase)
    try:
        return await use_case.execute(current_user.id, challenge_id, request)
    except NotFoundError as exception:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exception))
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))
    except RuntimeError as exception:
        raise internal_error(exception, "Recording progress")


# ---------------------------------------------------------------------------
# Referrals and stats
# ---------------------------------------------------------------------------

@router.post("/referrals", response_model=ReferralResponse, status_code=status.HTTP_201_CREATED)
async def create_referral(
    request: ReferralCreateRequest,
    current_user: UserResponse = Depends(get_current_user),
) -> ReferralResponse:
    use_case = get_container().get(CreateReferralUseCase)
    try:
        return await use_case.execute(current_user.id, request)
    except ValueError as exception:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exception))
    except RuntimeError as exception:
        raise internal_error(exception, "Sending referral")


@router.get("/referrals", response_model=ReferralListResponse)
async def list_referrals(current_user: UserResponse = Depends(get_current_user)) -> ReferralListResponse:
    use_case = get_container().get(ListReferralsUseCase)
    try:
        return await use_case.execute(current_user.id)
    except RuntimeError as exception:
        raise internal_error(exception, "Loading referrals")


@router.get("/stats", response_model=CommunityStatsResponse)
async def get_community_stats(current_user: UserResponse = Depends(get_current_user)) -> CommunityStatsResponse:
    use_case = get_container().get(GetCommunityStatsUseCase)
    try:
        return await use_case.execute(current_user.id)
    except RuntimeError as exception:
        raise internal_error(exception, "Loading community stats")
