import logging
import typing as t

from saudi_id.config import SaudiIdSettings

# Basic setup/config for python logging. The library itself only ever logs at DEBUG and never calls this on import.

LogLevel: t.TypeAlias = t.Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(SaudiIdSettings):
    log_level: LogLevel = "WARNING"


log_settings = LoggingSettings()


def setup_logging(level: LogLevel | None = None) -> None:
    """
    Initial logging setup for command-line use.

    :param level: Console log level, eg. from `saudi-id --log-level`. Falls back to `SAUDI_ID_LOG_LEVEL`, then
        `WARNING`.
    """
    default_handler = logging.StreamHandler()
    default_handler.setLevel(logging.getLevelName(level or log_settings.log_level))
    default_handler.setFormatter(logging.Formatter("%(asctime)s %(name)-12s %(levelname)-8s %(message)s"))

    # The root logger takes everything; filtering happens on the handler so that any other handler added later can
    # still see messages below the console level.
    logging.basicConfig(
        level=logging.NOTSET,
        handlers=[default_handler],
    )
