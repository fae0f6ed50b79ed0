import logging
import sys

LOGGER_NAME = "greetgen"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_RECORD_FIELDS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}


class ExtraFormatter(logging.Formatter):
    """Appends fields passed via ``extra=`` as key=value pairs."""

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {k: v for k, v in record.__dict__.items() if k not in _RECORD_FIELDS}
        if extras:
            line += " | " + " ".join(f"{k}={v}" for k, v in sorted(extras.items()))
        return line


def configure_logging(level: str = "INFO") -> logging.Logger:
    log = logging.getLogger(LOGGER_NAME)
    if not any(h.get_name() == LOGGER_NAME for h in log.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ExtraFormatter(LOG_FORMAT))
        handler.set_name(LOGGER_NAME)
        log.addHandler(handler)
    log.setLevel(level.upper())
    return log


logger = logging.getLogger(LOGGER_NAME)
