import mimetypes
from pathlib import Path

from typetrainer.texts.models import UploadedFile

DEFAULT_MEDIA_TYPE = "application/octet-stream"


class FileLoader:
    """Reads a local file into an UploadedFile, as an upload form would."""

    def load(self, path: Path) -> UploadedFile:
        """Read *path* and declare its media type from the file extension.

        Raises:
            FileNotFoundError: if nothing exists at *path*.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        media_type, _encoding = mimetypes.guess_type(path.name)
        return UploadedFile(
            content=path.read_bytes(),
            display_name=path.name,
            media_type=media_type or DEFAULT_MEDIA_TYPE,
        )
