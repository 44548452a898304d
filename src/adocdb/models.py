r"""Request and result data structures for document operations."""

from __future__ import annotations

__all__ = ["DeleteRequest", "DeleteResult"]

from dataclasses import dataclass

from adocdb.consistency import ConsistencyLevel


@dataclass(frozen=True)
class DeleteRequest:
    """Parameters of a single document deletion.

    Attributes:
        document_id: The id of the document to delete.
        partition_key: The partition key value of the document. Must be
            set if and only if the collection has a partition key
            definition.
        consistency_level: Optional consistency level override.
        session_token: Optional session token.
        user_agent: Optional client user agent.
    """

    document_id: str
    partition_key: str = ""
    consistency_level: ConsistencyLevel | str | None = None
    session_token: str = ""
    user_agent: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.document_id, str):
            msg = f"document_id must be a string, got {type(self.document_id).__name__}"
            raise ValueError(msg)
        object.__setattr__(
            self, "consistency_level", ConsistencyLevel.parse(self.consistency_level)
        )


@dataclass(frozen=True)
class DeleteResult:
    """Information extracted from a successful delete response.

    Attributes:
        request_charge: The request units consumed by the operation.
        session_token: The session token returned by the service, or an
            empty string if the response did not carry one.
    """

    request_charge: float
    session_token: str
