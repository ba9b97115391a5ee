from .reward_service import RewardOutcome, RewardService
from .image_validation import sniff_image_mime, validate_image_upload

__all__ = [
    "RewardOutcome",
    "RewardService",
    "sniff_image_mime",
    "validate_image_upload",
]
