"""Client software categories."""

from enum import Enum


class ClientType(str, Enum):
    """Kind of software that sent the request."""

    BROWSER = "browser"
    MOBILE_APP = "mobile app"
    LIBRARY = "library"
    FEED_READER = "feed reader"
    MEDIA_PLAYER = "media player"
    PIM = "pim"
