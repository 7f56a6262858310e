"""Builders de requisição para Twitter/X (upload chunked v1.1 e API v2)."""

from api.payload_builders.twitter.media import TwitterRequestBuilder

__all__ = ["TwitterRequestBuilder"]
