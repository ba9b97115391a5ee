"""Constants for Classification model field names"""


class ClassificationFields:
    """Field name constants for Classification model"""
    ID = "id"
    USER_ID = "user_id"
    ITEM = "item"
    RESULT = "result"
    RECYCLABLE = "recyclable"
    LABELS = "labels"
    IMAGE_URL = "image_url"
    POINTS_AWARDED = "points_awarded"
    TIMESTAMP = "timestamp"

    MONGO_ID = "_id"
