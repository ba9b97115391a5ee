"""Constants for community collections (posts, challenges, participants, referrals)"""


class PostFields:
    ID = "id"
    USER_ID = "user_id"
    AUTHOR_NAME = "author_name"
    CONTENT = "content"
    CREATED_AT = "created_at"

    MONGO_ID = "_id"


class ChallengeFields:
    ID = "id"
    TITLE = "title"
    DESCRIPTION = "description"
    TARGET = "target"
    UNIT = "unit"
    BADGE = "badge"
    LEVEL_REWARD = "level_reward"
    POINTS_REWARD = "points_reward"
    ACTIVE = "active"

    MONGO_ID = "_id"


class ParticipantFields:
    ID = "id"
    CHALLENGE_ID = "challenge_id"
    USER_ID = "user_id"
    PROGRESS = "progress"
    COMPLETED = "completed"
    JOINED_AT = "joined_at"
    COMPLETED_AT = "completed_at"

    MONGO_ID = "_id"


class ReferralFields:
    ID = "id"
    REFERRER_ID = "referrer_id"
    REFERRED_EMAIL = "referred_email"
    CREATED_AT = "created_at"

    MONGO_ID = "_id"


class RevokedTokenFields:
    JTI = "jti"
    EXPIRES_AT = "expires_at"
