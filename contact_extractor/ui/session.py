"""Per-page upload state and the API calls the UI makes."""

from dataclasses import dataclass, field

import httpx

from contact_extractor.models.schemas import ExtractionResponse, ExtractionStatus

NO_FILE_MESSAGE = "Please select a PDF or Word file first"
BUSY_MESSAGE = "Extraction already in progress"


@dataclass
class UploadSession:
    """State for one browser page: selected file, loading flag and results."""

    filename: str | None = None
    content_type: str | None = None
    content: bytes | None = None
    numbers: list[str] = field(default_factory=list)
    is_loading: bool = False

    @property
    def has_file(self) -> bool:
        return self.content is not None

    def extraction_blocker(self) -> str | None:
        """Reason extraction cannot start right now, or None if it can."""
        if not self.has_file:
            return NO_FILE_MESSAGE
        if self.is_loading:
            return BUSY_MESSAGE
        return None

    def select(self, filename: str, content_type: str | None, content: bytes) -> None:
        """Replace the selected file and drop results from the previous one."""
        self.filename = filename
        self.content_type = content_type
        self.content = content
        self.numbers = []

    def reset(self) -> None:
        self.filename = None
        self.content_type = None
        self.content = None
        self.numbers = []
        self.is_loading = False


def preview_lines(numbers: list[str], limit: int) -> list[str]:
    """Lines for the result list: the first ``limit`` numbers plus a remainder note."""
    lines = list(numbers[:limit])
    if len(numbers) > limit:
        lines.append(f"... and {len(numbers) - limit} more")
    return lines


def api_error_detail(response: httpx.Response) -> str:
    """Pull the FastAPI ``detail`` message out of an error response."""
    try:
        body = response.json()
    except ValueError:
        body = None
    detail = body.get("detail") if isinstance(body, dict) else None
    if isinstance(detail, str):
        return detail
    return f"HTTP {response.status_code}"


async def request_extraction(
    client: httpx.AsyncClient, base_url: str, session: UploadSession
) -> ExtractionResponse:
    """Upload the selected file to ``POST /extract``.

    Raises:
        ValueError: If no file is selected.
        httpx.HTTPStatusError: If the API rejects the document.
    """
    if not session.has_file:
        raise ValueError(NO_FILE_MESSAGE)

    response = await client.post(
        f"{base_url}/extract",
        files={
            "file": (
                session.filename,
                session.content,
                session.content_type or "application/octet-stream",
            )
        },
    )
    response.raise_for_status()
    result = ExtractionResponse.model_validate(response.json())
    session.numbers = result.numbers if result.status is ExtractionStatus.FOUND else []
    return result


async def request_render(
    client: httpx.AsyncClient, base_url: str, numbers: list[str]
) -> bytes:
    """Fetch a rendered PDF of ``numbers`` from ``POST /render``.

    Raises:
        ValueError: If there are no numbers to render.
        httpx.HTTPStatusError: If rendering fails.
    """
    if not numbers:
        raise ValueError("No contacts to generate PDF")

    response = await client.post(f"{base_url}/render", json={"numbers": numbers})
    response.raise_for_status()
    return response.content
