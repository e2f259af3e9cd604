from abc import ABC, abstractmethod
from typing import Any, TypeVar

from pydantic import ValidationError

from src.core.errors import BadRequestError
from src.core.models import EventType, NormalizedEvent, SkippedEvent, WebhookEvent
from src.webhooks.models import WebhookPayloadModel, describe_validation_error

PayloadT = TypeVar("PayloadT", bound=WebhookPayloadModel)


class EventHandler(ABC):
    """
    Abstract base class for webhook event handlers.

    A handler turns the payload of one event type into the event-specific
    workflow inputs, or decides the event does not start a build.
    """

    event_type: EventType

    @abstractmethod
    def normalize(self, event: WebhookEvent) -> NormalizedEvent | SkippedEvent:
        """
        Extract the workflow inputs for this event.

        Args:
            event: The parsed WebhookEvent.

        Returns:
            A NormalizedEvent with the inputs and the source branch, or a
            SkippedEvent when no build should run.

        Raises:
            BadRequestError: If the payload lacks required data.
        """

    def parse_payload(self, model: type[PayloadT], payload: dict[str, Any]) -> PayloadT:
        """Validate the payload against a schema, reporting the first bad field."""
        try:
            return model.model_validate(payload)
        except ValidationError as e:
            field, reason = describe_validation_error(e)
            raise BadRequestError(
                f"Invalid {self.event_type.value} event payload",
                f"{field}: {reason}",
                field=field,
            ) from e
