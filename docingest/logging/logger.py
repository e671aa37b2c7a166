import logging
import sys


class Log:
    """Process-wide logger for ingestion runs.

    Batch start and end go to info, per-item failures to error, skipped or
    suspicious uploads to warning and item state transitions to debug.
    """

    _logger: logging.Logger = logging.getLogger("docingest")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Apply ``log_level`` and attach the stdout handler on first call."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        """Batch progress and summaries."""
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        """An item that ended as a failure outcome."""
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        """Uploads outside the accept list and cancelled items."""
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        """Per-item state transitions."""
        cls._logger.debug(message, extra=kwargs)
