from typing import Any, Sequence, Type, TypeVar

from pydantic import BaseModel

from errors import ValidationError
from Models.ShareRequest import ShareRequest
from Models.SummarizationRequest import SummarizationRequest

SUMMARIZE_FIELDS_MESSAGE = "Transcript and prompt are required."
SHARE_FIELDS_MESSAGE = "Summary and recipient emails are required."

RequestModel = TypeVar("RequestModel", bound=BaseModel)


def _is_present(value: Any) -> bool:
    # Whitespace-only strings count as present.
    return isinstance(value, str) and value != ""


def require_fields(body: Any, fields: Sequence[str], model: Type[RequestModel], message: str) -> RequestModel:
    """
    Checks that every field in `fields` is a non-empty string in `body` and builds `model` from them.
    A body that is not a JSON object, a missing key, a null value and an empty string all count as absent.
    """
    if not isinstance(body, dict):
        raise ValidationError(message)
    if not all(_is_present(body.get(field)) for field in fields):
        raise ValidationError(message)
    return model(**{field: body[field] for field in fields})


def validate_summarize_request(body: Any) -> SummarizationRequest:
    return require_fields(body, ("transcript", "prompt"), SummarizationRequest, SUMMARIZE_FIELDS_MESSAGE)


def validate_share_request(body: Any) -> ShareRequest:
    return require_fields(body, ("summary", "emails"), ShareRequest, SHARE_FIELDS_MESSAGE)
