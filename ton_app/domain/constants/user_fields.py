"""Constants for User model field names"""


class UserFields:
    """Field name constants for User model"""
    USER_ID = "user_id"
    NAME = "name"
    EMAIL = "email"
    PASSWORD_HASH = "password_hash"

    ENTITY = "user"
