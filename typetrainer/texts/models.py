from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadedFile:
    """An uploaded file held in memory for the duration of one request."""

    content: bytes = field(repr=False)
    display_name: str
    media_type: str
