"""Tagged handler outcomes and their single translation into Flask responses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Iterable, Union

from flask import Response, jsonify, stream_with_context


# Marks an UpstreamFailure whose body carries no "details" key.
NO_DETAILS = object()


@dataclass(frozen=True)
class Ok:
    body: Any
    status: int = 200


@dataclass(frozen=True)
class Streamed:
    chunks: Iterable[bytes]
    content_type: str
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class Failure:
    message: str
    status: ClassVar[int] = 500

    def payload(self) -> dict:
        return {"error": self.message}


@dataclass(frozen=True)
class BadRequest(Failure):
    status: ClassVar[int] = 400


@dataclass(frozen=True)
class NotFound(Failure):
    status: ClassVar[int] = 404


@dataclass(frozen=True)
class ConfigError(Failure):
    status: ClassVar[int] = 500


@dataclass(frozen=True)
class UpstreamFailure(Failure):
    details: Any = NO_DETAILS
    status: ClassVar[int] = 500

    def payload(self) -> dict:
        data = {"error": self.message}
        if self.details is not NO_DETAILS:
            data["details"] = self.details
        return data


Outcome = Union[Ok, Streamed, BadRequest, NotFound, ConfigError, UpstreamFailure]


def to_response(outcome: Outcome):
    if isinstance(outcome, Ok):
        return jsonify(outcome.body), outcome.status
    if isinstance(outcome, Streamed):
        return Response(stream_with_context(iter(outcome.chunks)),
                        status=200, content_type=outcome.content_type,
                        headers=outcome.headers, direct_passthrough=True)
    if isinstance(outcome, Failure):
        return jsonify(outcome.payload()), outcome.status
    raise TypeError(f"Unsupported handler outcome: {outcome!r}")
