"""
Structured logging for the booking platform.

Records carry the active tenant (the business id sent in the tenant header)
and any fields bound with LogContext, in both the JSON and the plain format.
"""
import logging
import sys
from contextvars import ContextVar, Token
from typing import Any, Dict, Optional

from pythonjsonlogger import jsonlogger

from core.settings import settings


NO_TENANT = "-"

_tenant_id: ContextVar[Optional[str]] = ContextVar("tenant_id", default=None)
_bound_fields: ContextVar[Dict[str, Any]] = ContextVar("log_fields", default={})


def set_tenant(tenant_id: Optional[str]) -> Token:
    """Bind the tenant for the current request. Returns the token for reset_tenant."""
    return _tenant_id.set(tenant_id)


def reset_tenant(token: Token) -> None:
    _tenant_id.reset(token)


class TenantContextFilter(logging.Filter):
    """Copy the active tenant and bound LogContext fields onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.tenant_id = _tenant_id.get() or NO_TENANT
        for key, value in _bound_fields.get().items():
            # explicit `extra=` values win over bound ones
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter adding level, source location and deployment fields."""

    def add_fields(
        self,
        log_record: Dict[str, Any],
        record: logging.LogRecord,
        message_dict: Dict[str, Any]
    ) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = self.formatTime(record, self.datefmt)
        log_record['level'] = record.levelname
        log_record['logger'] = record.name
        log_record['module'] = record.module
        log_record['function'] = record.funcName
        log_record['line'] = record.lineno
        log_record['tenant_id'] = getattr(record, 'tenant_id', NO_TENANT)

        log_record['app_name'] = settings.app_name
        log_record['environment'] = settings.app_env

        if record.exc_info:
            log_record['exc_info'] = self.formatException(record.exc_info)


def build_formatter(use_json: bool) -> logging.Formatter:
    """JSON lines for staging/production, one readable line per record otherwise."""
    if use_json:
        return CustomJsonFormatter(
            fmt='%(timestamp)s %(level)s %(name)s %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
    return logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - [tenant=%(tenant_id)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def setup_logging() -> None:
    """Configure the root logger with a tenant-aware stdout handler."""
    use_json = not settings.is_development

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, settings.log_level))
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(build_formatter(use_json))
    console_handler.addFilter(TenantContextFilter())
    root_logger.addHandler(console_handler)

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.db_echo else logging.WARNING
    )

    logging.info(
        "Logging configured",
        extra={
            "log_level": settings.log_level,
            "environment": settings.app_env,
            "json_logging": use_json
        }
    )


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name (typically __name__)."""
    return logging.getLogger(name)


class LogContext:
    """
    Bind key/value fields to every record logged inside the block.

    Exceptions escaping the block are logged once with the bound fields and
    then propagate.

    Example:
        with LogContext(logger, reservation_id=reservation.id) as ctx:
            ctx.log("info", "Invoice issued")
    """

    def __init__(self, logger: logging.Logger = None, **fields: Any):
        self.fields = fields
        self.logger = logger or get_logger(__name__)
        self._token: Optional[Token] = None

    def __enter__(self) -> 'LogContext':
        self._token = _bound_fields.set({**_bound_fields.get(), **self.fields})
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if exc_type is not None:
                self.logger.error(
                    f"Exception in context: {exc_type.__name__}",
                    exc_info=(exc_type, exc_val, exc_tb)
                )
        finally:
            _bound_fields.reset(self._token)

    def log(self, level: str, message: str, **extra_fields: Any) -> None:
        """Log at `level` (debug, info, warning, error, critical) with extra fields."""
        getattr(self.logger, level.lower())(message, extra=extra_fields)
