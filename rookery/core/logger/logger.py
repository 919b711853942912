"""
Logging Bootstrap.

Configures the project logger with two sinks: a colored console stream for
interactive runs and a rotating plain-text file inside the run's log
directory. Re-running `Logger.setup` replaces existing handlers, so repeated
pipeline invocations in one interpreter never duplicate output.
"""

# =========================================================================== #
#                                Standard Imports                             #
# =========================================================================== #
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

# =========================================================================== #
#                                Internal Imports                             #
# =========================================================================== #
from ..paths import LOG_FILENAME, LOGGER_NAME
from .styles import LogStyle

# =========================================================================== #
#                                 FORMATTERS                                  #
# =========================================================================== #

_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ColorFormatter(logging.Formatter):
    """Applies ANSI colors by level. Console only."""

    LEVEL_COLORS = {
        logging.DEBUG: LogStyle.DIM,
        logging.INFO: "",
        logging.WARNING: LogStyle.YELLOW,
        logging.ERROR: LogStyle.RED,
        logging.CRITICAL: LogStyle.BOLD + LogStyle.RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        color = self.LEVEL_COLORS.get(record.levelno, "")
        return f"{color}{message}{LogStyle.RESET}" if color else message


# =========================================================================== #
#                                   LOGGER                                    #
# =========================================================================== #

class Logger:
    """Static factory for the project logger."""

    MAX_BYTES = 5 * 1024 * 1024
    BACKUP_COUNT = 3

    @staticmethod
    def setup(
        name: str = LOGGER_NAME,
        log_dir: Path | None = None,
        level: str | int = "INFO",
    ) -> logging.Logger:
        """
        Initializes (or re-initializes) a named logger.

        Args:
            name: Logger identity, shared by every module of the package.
            log_dir: Directory receiving `run.log`. Console only when None.
            level: Logging level name or numeric value.

        Returns:
            The configured logger.
        """
        logger = logging.getLogger(name)
        logger.setLevel(level if isinstance(level, int) else level.upper())
        logger.propagate = False

        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)

        console = logging.StreamHandler(sys.stdout)
        console.setFormatter(ColorFormatter(_FORMAT, datefmt=_DATE_FORMAT))
        logger.addHandler(console)

        if log_dir is not None:
            log_dir = Path(log_dir)
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = RotatingFileHandler(
                log_dir / LOG_FILENAME,
                maxBytes=Logger.MAX_BYTES,
                backupCount=Logger.BACKUP_COUNT,
                encoding="utf-8",
            )
            file_handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
            logger.addHandler(file_handler)

        logger.debug(f"Logger '{name}' initialized (level={logging.getLevelName(logger.level)})")
        return logger
