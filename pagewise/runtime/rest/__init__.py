"""REST runtime abstractions."""

from ...utils.http import HTTPClient
from .fetcher import RestPageFetcher, RestSearchSpec, encode_param

__all__ = [
    "HTTPClient",
    "RestPageFetcher",
    "RestSearchSpec",
    "encode_param",
]
