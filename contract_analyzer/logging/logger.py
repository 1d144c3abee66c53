import logging
import sys


class Log:
    """Centralized logging with structured format.

    Keyword arguments become attributes on the log record, so handlers and
    formatters can read fields such as ``kind`` or ``status`` directly. Names
    reserved by ``logging.LogRecord`` (``filename``, ``module``, ...) must not
    be used as keys.
    """

    _logger: logging.Logger = logging.getLogger("contract_analyzer")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        """Log an info message."""
        cls._logger.info(message, extra=fields)

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        """Log an error message."""
        cls._logger.error(message, extra=fields)

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        """Log a warning message."""
        cls._logger.warning(message, extra=fields)

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        """Log a debug message."""
        cls._logger.debug(message, extra=fields)
