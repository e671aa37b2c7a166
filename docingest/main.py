import sys
from pathlib import Path

from docingest.config.settings import Settings
from docingest.ingestion.exceptions import FileReadError
from docingest.ingestion.file_loader import FileLoader
from docingest.ingestion.pipeline import build_pipeline
from docingest.ingestion.session import UploadSession
from docingest.logging.logger import Log


def main(argv: list[str] | None = None) -> int:
    """Entry point: load uploads -> process as one batch -> export results.

    Files named on the command line are processed; with no arguments every
    file in the uploads directory is. Returns 0 when every file succeeded,
    1 when any failed and 2 when an upload could not be loaded.
    """
    args = sys.argv[1:] if argv is None else argv
    settings = Settings()
    Log.configure(settings.log_level)

    loader = FileLoader(uploads_root=settings.uploads_dir)
    paths: list[Path | str] = list(args) if args else list(loader.discover())
    try:
        items = [loader.load(path) for path in paths]
    except (FileNotFoundError, FileReadError) as exc:
        Log.error(f"Cannot load uploads: {exc}")
        return 2

    session = UploadSession(build_pipeline(settings))
    session.add_files(items)
    outcomes = session.process()

    if settings.results_path:
        session.export_results(Path(settings.results_path))

    failed = [outcome.file_name for outcome in outcomes if not outcome.succeeded]
    if failed:
        Log.warning(f"{len(failed)} of {len(outcomes)} files failed: {', '.join(failed)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
