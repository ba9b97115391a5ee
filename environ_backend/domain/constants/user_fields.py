"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    ID = "id"
    FULL_NAME = "full_name"
    EMAIL = "email"
    HASHED_PASSWORD = "hashed_password"
    POINTS = "points"
    LEVEL = "level"
    BADGES = "badges"
    CITY = "city"
    RECYCLABLE_COUNT = "recyclable_count"
    CO2_SAVED_KG = "co2_saved_kg"
    CREATED_AT = "created_at"

    # MongoDB specific
    MONGO_ID = "_id"  # MongoDB's internal _id field
