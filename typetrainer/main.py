import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from typetrainer.config.settings import Settings
from typetrainer.database.connection import close_pool, init_pool
from typetrainer.logging.logger import Log
from typetrainer.pdf.exceptions import PdfExtractionError
from typetrainer.summarization.exceptions import SummarizationError
from typetrainer.texts.exceptions import TextError
from typetrainer.texts.file_loader import FileLoader
from typetrainer.texts.models import UploadedFile
from typetrainer.texts.service import TextService, build_text_service

# ValueError covers bad configuration values and undecodable text files.
HANDLED_ERRORS = (
    PdfExtractionError,
    TextError,
    SummarizationError,
    FileNotFoundError,
    ValueError,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typetrainer",
        description="Clean, import and summarize texts for typing practice.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    clean = commands.add_parser("clean", help="Print the cleaned text of a PDF or text file.")
    clean.add_argument("path", type=Path)

    imp = commands.add_parser("import", help="Store the cleaned text of a PDF or text file.")
    imp.add_argument("path", type=Path)
    imp.add_argument("--user-id", type=int, required=True)
    imp.add_argument("--title", required=True)
    imp.add_argument("--category-id", type=int, default=None)

    summarize = commands.add_parser("summarize", help="Store an AI summary of a text.")
    summarize.add_argument("text_id", type=int)
    summarize.add_argument("--user-id", type=int, required=True)
    return parser


def _read_source(path: Path) -> tuple[str | None, UploadedFile | None]:
    """Return (pasted text, uploaded file); exactly one is set."""
    if path.suffix.lower() == ".pdf":
        return None, FileLoader().load(path)
    if not path.is_file():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_text(encoding="utf-8"), None


def _clean(service: TextService, args: argparse.Namespace) -> int:
    content, uploaded = _read_source(args.path)
    print(service.prepare_content(content, uploaded))
    return 0


def _import(service: TextService, args: argparse.Namespace) -> int:
    content, uploaded = _read_source(args.path)
    record = service.add_text(
        args.user_id,
        args.title,
        content=content,
        uploaded_file=uploaded,
        category_id=args.category_id,
    )
    print(record.id)
    return 0


def _summarize(service: TextService, args: argparse.Namespace) -> int:
    record = service.summarize_text(args.text_id, args.user_id)
    print(record.id)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: parse args -> load settings -> build service -> run command."""
    args = build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    needs_db = args.command != "clean"
    if needs_db:
        init_pool(settings)

    try:
        service = build_text_service(settings, with_summarizer=args.command == "summarize")
        if args.command == "clean":
            return _clean(service, args)
        if args.command == "import":
            return _import(service, args)
        return _summarize(service, args)
    except HANDLED_ERRORS as exc:
        Log.error(f"{args.command} failed: {exc}")
        return 1
    finally:
        if needs_db:
            close_pool()


if __name__ == "__main__":
    sys.exit(main())
