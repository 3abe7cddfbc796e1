"""
Handler factories returning dictConfig entries. Every handler runs the
request_id and redact filters, so no handler can emit an unredacted secret.
"""

from pathlib import Path

from catalog_api.config.settings import Settings

_FILTERS = ["request_id", "redact"]


def _formatter_name(settings: Settings) -> str:
    return "json" if settings.LOG_FORMAT == "json" else "standard"


def get_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "formatter": _formatter_name(settings),
        "level": settings.LOG_LEVEL,
        "filters": list(_FILTERS),
    }


def _rotating_file_handler(settings: Settings, filename: str, level: str, formatter: str) -> dict:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "formatter": formatter,
        "level": level,
        "filename": str(Path(settings.LOG_DIR) / filename),
        "maxBytes": settings.LOG_MAX_BYTES,
        "backupCount": settings.LOG_BACKUP_COUNT,
        "encoding": "utf-8",
        "filters": list(_FILTERS),
    }


def get_file_handler(settings: Settings) -> dict:
    return _rotating_file_handler(settings, "catalog-api.log", settings.LOG_LEVEL, _formatter_name(settings))


def get_error_file_handler(settings: Settings) -> dict:
    # error files stay JSON whatever LOG_FORMAT says
    return _rotating_file_handler(settings, "errors.log", "ERROR", "json")


def get_error_console_handler(settings: Settings) -> dict:
    return {
        "class": "logging.StreamHandler",
        "formatter": "json",
        "level": "ERROR",
        "filters": list(_FILTERS),
    }
