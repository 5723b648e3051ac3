"""RFC 7807 problem details for requests rejected before the ajax lifecycle.

RFC 7807: https://tools.ietf.org/html/rfc7807

Exports:
    ProblemDetails: Error body for unknown commands, unparseable bodies,
        disallowed methods and unexpected crashes
"""

from pydantic import BaseModel, Field

from src.core.config import settings

# status -> (title, type slug)
_STATUS_INFO: dict[int, tuple[str, str]] = {
    400: ("Bad Request", "bad-request"),
    404: ("Resource Not Found", "not-found"),
    405: ("Method Not Allowed", "method-not-allowed"),
    500: ("Internal Server Error", "internal-server-error"),
}


class ProblemDetails(BaseModel):
    """Problem details body, served as application/problem+json.

    Examples:
        >>> ProblemDetails.for_status(
        ...     404,
        ...     detail="Unknown ajax command: delete_everything",
        ...     instance="/api/v1/ajax/delete_everything",
        ... ).title
        'Resource Not Found'
    """

    type: str = Field(..., description="URI identifying the problem type")
    title: str = Field(..., description="Short summary of the problem type")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Explanation of this occurrence")
    instance: str = Field(..., description="Request path")
    trace_id: str | None = Field(None, description="Request trace ID")

    @classmethod
    def for_status(
        cls,
        status: int,
        *,
        detail: str,
        instance: str,
        trace_id: str | None = None,
    ) -> "ProblemDetails":
        """Build the problem for an HTTP status, deriving type and title."""
        title, slug = _STATUS_INFO.get(status, ("Error", "error"))
        return cls(
            type=f"{settings.api_base_url}/errors/{slug}",
            title=title,
            status=status,
            detail=detail,
            instance=instance,
            trace_id=trace_id,
        )
