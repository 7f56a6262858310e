"""Use cases específicos de Twitter/X."""

from .publish_video import PublishVideoResult, PublishVideoUseCase

__all__ = [
    "PublishVideoResult",
    "PublishVideoUseCase",
]
