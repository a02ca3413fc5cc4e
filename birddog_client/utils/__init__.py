"""Utility helpers for HTTP transport and query encoding."""

from .http_client import (
    AuthenticationError,
    BirdDogError,
    DecodeError,
    HttpClient,
    HttpError,
    TLSAdapter,
    TransportError,
    encode_query,
    extract_field,
    indexed_params,
)

__all__ = [
    "HttpClient",
    "TLSAdapter",
    "BirdDogError",
    "TransportError",
    "HttpError",
    "AuthenticationError",
    "DecodeError",
    "encode_query",
    "extract_field",
    "indexed_params",
]
