import tempfile
from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path

from typetrainer.logging.logger import Log


@contextmanager
def scratch_pdf(pdf_bytes: bytes, directory: Path | None = None) -> Generator[Path, None, None]:
    """Write *pdf_bytes* to a uniquely named ``.pdf`` file and yield its path.

    The file is removed on every exit path. A failed removal is logged and
    swallowed so it never replaces the outcome of the ``with`` body.
    """
    handle = tempfile.NamedTemporaryFile(suffix=".pdf", dir=directory, delete=False)
    path = Path(handle.name)
    try:
        with handle:
            handle.write(pdf_bytes)
        Log.debug(f"Created temp file {path} ({len(pdf_bytes)} bytes)")
        yield path
    finally:
        _remove(path)


def _remove(path: Path) -> None:
    try:
        path.unlink(missing_ok=True)
    except OSError as exc:
        Log.warning(f"Could not remove temp file {path}: {exc}")
    else:
        Log.debug(f"Cleaned up temp file {path}")
