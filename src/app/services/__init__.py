"""Serviços de aplicação do fluxo de upload e publicação.

Dependem apenas de protocolos (app/protocols); implementações concretas
de IO são injetadas pelo bootstrap.
"""

from app.services.chunk_sequencer import count_chunks, split_into_chunks
from app.services.post_publisher import PostPublisher
from app.services.processing_poller import ProcessingPoller
from app.services.upload_session import UploadSessionMachine
from app.services.user_identity import UserIdentityResolver

__all__ = [
    "PostPublisher",
    "ProcessingPoller",
    "UploadSessionMachine",
    "UserIdentityResolver",
    "count_chunks",
    "split_into_chunks",
]
