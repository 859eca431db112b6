"""Infrastructure layer - OAuth2 transport and SoundCloud strategy"""

from .oauth2_client import OAuth2Client
from .soundcloud_strategy import SoundCloudTokenStrategy, Strategy

__all__ = [
    "OAuth2Client",
    "SoundCloudTokenStrategy",
    "Strategy",
]
