import json
import logging
from dataclasses import dataclass
from typing import Any

from hookreceiver.schemas.events import EventEnvelope, PaymentRequestEvent, lookup_schema
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class DispatchError(Exception):
    pass


class BodyReadError(DispatchError):
    pass


class MalformedPayload(DispatchError):
    pass


class SchemaMismatch(DispatchError):
    def __init__(self, kind: str, errors: list[dict[str, Any]]):
        super().__init__(f"Payload does not match the {kind} schema")
        self.kind = kind
        self.errors = errors


class ResponseEncodeError(DispatchError):
    pass


@dataclass(frozen=True)
class DispatchResult:
    event: str
    status_code: int
    payload: dict[str, Any] | None = None
    model: PaymentRequestEvent | None = None

    @property
    def recognized(self) -> bool:
        return self.model is not None


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def extract_event_kind(raw: bytes) -> str:
    """
    Read only the top-level ``event`` field of a JSON document.

    Returns an empty string when the document is not an object or carries no
    string ``event``. Raises MalformedPayload if ``raw`` is not JSON at all.
    """
    try:
        document = json.loads(raw, parse_constant=_reject_constant)
    except ValueError as e:
        raise MalformedPayload(f"Invalid JSON payload: {e}") from e

    if not isinstance(document, dict):
        return ""
    try:
        return EventEnvelope.model_validate(document).event
    except ValidationError:
        return ""


def dispatch(raw: bytes) -> DispatchResult:
    kind = extract_event_kind(raw)

    schema = lookup_schema(kind)
    if schema is None:
        logger.info(f"no event type found: {kind!r}")
        return DispatchResult(event=kind, status_code=500)

    logger.info(f"{schema.label} hook event: {kind}")
    try:
        event = schema.model_validate_json(raw)
    except ValidationError as ve:
        logger.error(f"error decoding {schema.label} data: {ve}")
        raise SchemaMismatch(kind, ve.errors(include_url=False)) from ve

    logger.info(
        f"{schema.label} data decoded successfully: "
        f"id={event.data.id}, amount={event.data.amount}"
    )
    return DispatchResult(
        event=kind, status_code=200, payload=event.summary(), model=event
    )
