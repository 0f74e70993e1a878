"""
Simple logging configuration.

The library only emits records through named category loggers; applications
opt in to console/file output by calling setup_logging().
"""
import logging
import logging.handlers
from enum import Enum
from pathlib import Path


class LogCategory(str, Enum):
    """Enumeration for standardized log categories."""
    APP = "chatwire"
    REST = "chatwire.rest"
    ENTITIES = "chatwire.entities"
    ERRORS = "chatwire.errors"


DEFAULT_LOG_LEVEL = logging.INFO

# Fields that should be masked in logs
SENSITIVE_FIELDS = {
    'token',
    'api_token',
    'apitoken',
    'authorization',
    'secret',
    'password',
}

MASK = '***MASKED***'


def _sanitize_data(data):
    """
    Sanitize data to mask sensitive fields.

    Recursively processes dictionaries and lists. Keys matching any entry of
    SENSITIVE_FIELDS (case-insensitive substring match) have their value masked.
    """
    if data is None:
        return data

    if isinstance(data, dict):
        sanitized = {}
        for key, value in data.items():
            key_lower = str(key).lower()
            if any(sensitive in key_lower for sensitive in SENSITIVE_FIELDS):
                sanitized[key] = MASK
            else:
                sanitized[key] = _sanitize_data(value)
        return sanitized

    if isinstance(data, list):
        return [_sanitize_data(item) for item in data]

    return data


def _resolve_log_level(level_value, default=DEFAULT_LOG_LEVEL):
    """Resolve string/integer log level inputs to a logging level."""
    if isinstance(level_value, str):
        candidate = level_value.strip()
        if not candidate:
            return default, True
        if candidate.isdigit():
            level_value = int(candidate)
        else:
            candidate = candidate.upper()
            try:
                return logging._checkLevel(candidate), False
            except (ValueError, TypeError):
                return default, True
    try:
        return logging._checkLevel(level_value), False
    except (ValueError, TypeError):
        return default, True


def _get_settings():
    """Lazy import to avoid circular dependency with config module."""
    from chatwire.core.config import settings
    return settings


def setup_logging():
    """Setup logging configuration for the chatwire loggers."""
    settings = _get_settings()

    library_logger = logging.getLogger(LogCategory.APP.value)
    for handler in library_logger.handlers[:]:
        library_logger.removeHandler(handler)
        handler.close()

    resolved_level, used_default_level = _resolve_log_level(settings.log_level)

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(resolved_level)
    library_logger.addHandler(console_handler)

    if settings.log_file:
        log_path = Path(settings.log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.setLevel(resolved_level)
        library_logger.addHandler(file_handler)

    library_logger.setLevel(resolved_level)

    # Reduce noise from the transport
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    if used_default_level:
        logger.warning(
            "Invalid log level '%s' in configuration, falling back to INFO",
            settings.log_level
        )
    logger.info(
        "Logging configured - Level: %s",
        logging.getLevelName(resolved_level)
    )


def _log_with_context(logger: logging.Logger, level: int, message: str, exc_info: bool = False, **kwargs):
    """Internal helper to format logs with extra context.

    Args:
        logger: Logger instance to use
        level: Logging level
        message: Log message
        exc_info: Whether to include exception traceback
        **kwargs: Additional context appended to the message (e.g. server_id, integration_id).
                  Sensitive fields are masked.
    """
    log_message = message
    if kwargs:
        sanitized_kwargs = _sanitize_data(kwargs)
        extra_context = ", ".join(f"{k}={v}" for k, v in sanitized_kwargs.items())
        log_message = f"{log_message} ({extra_context})"

    logger.log(level, log_message, exc_info=exc_info)


def log_info(message: str, category: LogCategory = LogCategory.APP, **kwargs):
    """Log info messages."""
    _log_with_context(logging.getLogger(category.value), logging.INFO, message, **kwargs)


def log_debug(message: str, category: LogCategory = LogCategory.APP, **kwargs):
    """Log debug messages."""
    _log_with_context(logging.getLogger(category.value), logging.DEBUG, message, **kwargs)


def log_warning(message: str, category: LogCategory = LogCategory.APP, **kwargs):
    """Log warning messages."""
    _log_with_context(logging.getLogger(category.value), logging.WARNING, message, **kwargs)


def log_error(error: Exception | str, **kwargs):
    """Log errors.

    Args:
        error: Exception object or error message string
        **kwargs: Additional context (e.g. method, path, status_code)
    """
    logger = logging.getLogger(LogCategory.ERRORS.value)
    message = f"Error: {str(error)}"
    # exc_info should only be True if we have an actual Exception
    exc_info = isinstance(error, Exception)
    _log_with_context(logger, logging.ERROR, message, exc_info=exc_info, **kwargs)
