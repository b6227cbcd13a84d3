from datetime import UTC, datetime
from typing import Any, ClassVar, Literal

from pydantic import BaseModel, Field, model_validator

# Timestamp a missing or null field decodes to
ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)


class EventEnvelope(BaseModel, strict=True):
    event: str = Field("", description="Event type / name")


class ProviderModel(BaseModel, strict=True, frozen=True):
    """
    Lenient about absence, strict about types.

    Missing keys and JSON nulls keep the field's zero value; a value of the
    wrong type is still a validation error.
    """

    @model_validator(mode="before")
    @classmethod
    def null_keeps_default(cls, values: Any) -> Any:
        if values is None:
            return {}
        if isinstance(values, dict):
            return {key: value for key, value in values.items() if value is not None}
        return values


class Notification(ProviderModel):
    sent_at: datetime = ZERO_TIME
    channel: str = ""


class PaymentRequestData(ProviderModel):
    """Fields shared by every ``paymentrequest.*`` event body."""

    id: int = 0
    domain: str = ""
    amount: int = Field(0, description="Amount in minor currency units")
    currency: str = ""
    due_date: Any = None
    has_invoice: bool = False
    invoice_number: Any = None
    description: str = ""
    pdf_url: Any = None
    line_items: list[Any] = Field(default_factory=list)
    tax: list[Any] = Field(default_factory=list)
    request_code: str = ""
    status: str = ""
    paid: bool = False
    metadata: Any = None
    offline_reference: str = ""
    customer: int = Field(0, description="Provider customer ID")
    created_at: datetime = ZERO_TIME


class PendingPaymentData(PaymentRequestData):
    paid_at: Any = None
    notifications: list[Any] = Field(default_factory=list)


class SuccessfulPaymentData(PaymentRequestData):
    paid_at: datetime = ZERO_TIME
    notifications: list[Notification] = Field(default_factory=list)


class PaymentRequestEvent(ProviderModel):
    """Base for typed webhook events.

    Subclasses pin ``kind`` to the discriminator they decode and project the
    decoded event into the JSON summary returned to the provider.
    """

    kind: ClassVar[str]
    label: ClassVar[str]

    event: str
    data: PaymentRequestData = Field(default_factory=PaymentRequestData)

    def summary(self) -> dict[str, Any]:
        """Response body for this event; every registered subclass overrides it."""
        raise NotImplementedError


class PaymentPendingEvent(PaymentRequestEvent):
    kind: ClassVar[str] = "paymentrequest.pending"
    label: ClassVar[str] = "payment pending"

    event: Literal["paymentrequest.pending"]
    data: PendingPaymentData = Field(default_factory=PendingPaymentData)

    def summary(self) -> dict[str, Any]:
        return {"event type": self.event, "amount": self.data.amount}


class PaymentSuccessEvent(PaymentRequestEvent):
    kind: ClassVar[str] = "paymentrequest.success"
    label: ClassVar[str] = "payment successful"

    event: Literal["paymentrequest.success"]
    data: SuccessfulPaymentData = Field(default_factory=SuccessfulPaymentData)

    def summary(self) -> dict[str, Any]:
        return {"event type": self.event, "description": self.data.description}


EVENT_SCHEMAS: dict[str, type[PaymentRequestEvent]] = {
    schema.kind: schema for schema in (PaymentPendingEvent, PaymentSuccessEvent)
}


def lookup_schema(kind: str) -> type[PaymentRequestEvent] | None:
    return EVENT_SCHEMAS.get(kind)
