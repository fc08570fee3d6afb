"""Constants for Product model field names"""


class ProductFields:
    """Field name constants for Product model"""
    PRODUCT_ID = "product_id"
    TITLE = "title"
    DESCRIPTION = "description"
    PRICE = "price"
    PUBLISH_DATE = "publish_date"
    PHOTO_LINK = "photo_link"

    ENTITY = "product"
