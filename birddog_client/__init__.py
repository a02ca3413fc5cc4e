"""Client for the BirdDog HR REST API."""

from .client import BirdDogClient
from .models import ClientSettings, Credentials
from .utils.http_client import (
    AuthenticationError,
    BirdDogError,
    DecodeError,
    HttpClient,
    HttpError,
    TransportError,
)

__version__ = "0.1.0"
__all__ = [
    "BirdDogClient",
    "ClientSettings",
    "Credentials",
    "HttpClient",
    "BirdDogError",
    "TransportError",
    "HttpError",
    "AuthenticationError",
    "DecodeError",
]
