import logging
import sys
from pathlib import Path


class Log:
    """Audit-run logger: stdout always, plus an optional log file kept with the evidence."""

    _logger: logging.Logger = logging.getLogger("revocation_audit")
    _format = "%(asctime)s [%(levelname)s] %(message)s"

    @classmethod
    def configure(cls, log_level: str, log_file: Path | None = None) -> None:
        """Set the level and attach the stdout handler (and file handler) once."""
        cls._logger.setLevel(log_level.upper())
        formatter = logging.Formatter(cls._format)
        if not any(type(h) is logging.StreamHandler for h in cls._logger.handlers):
            stream_handler = logging.StreamHandler(sys.stdout)
            stream_handler.setFormatter(formatter)
            cls._logger.addHandler(stream_handler)
        if log_file is not None and not cls._has_file_handler(log_file):
            log_file.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(log_file, encoding="utf-8")
            file_handler.setFormatter(formatter)
            cls._logger.addHandler(file_handler)

    @classmethod
    def shutdown(cls) -> None:
        """Flush and detach every handler (file handlers keep the log open otherwise)."""
        for handler in list(cls._logger.handlers):
            handler.close()
            cls._logger.removeHandler(handler)

    @classmethod
    def _has_file_handler(cls, log_file: Path) -> bool:
        target = str(log_file.resolve())
        return any(
            isinstance(h, logging.FileHandler) and h.baseFilename == target
            for h in cls._logger.handlers
        )

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def error(cls, message: str, **kwargs: object) -> None:
        cls._logger.error(message, extra=kwargs)

    @classmethod
    def warning(cls, message: str, **kwargs: object) -> None:
        cls._logger.warning(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
