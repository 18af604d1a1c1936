"""Common Pydantic schemas shared across the API."""

from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, Field, HttpUrl, TypeAdapter, ValidationError

from domain.services.list_manager import StoreFault

_http_url = TypeAdapter(HttpUrl)


def _check_http_url(value: str) -> str:
    """Reject anything that is not an http(s) URL; keep the input as submitted."""
    try:
        _http_url.validate_python(value)
    except ValidationError as exc:
        raise ValueError("must be an http or https URL") from exc
    return value


UrlStr = Annotated[str, Field(max_length=500), AfterValidator(_check_http_url)]


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None


class StoreFaultResponse(BaseModel):
    """Store failure attached to an admin list response."""

    operation: str
    error_code: str
    message: str

    @classmethod
    def from_fault(cls, fault: StoreFault | None) -> "StoreFaultResponse | None":
        if fault is None:
            return None
        return cls(
            operation=fault.operation,
            error_code=fault.error_code,
            message=fault.message,
        )
