import logging
import sys
from pathlib import Path

from loguru import logger

from src.catalog.runtime.context import get_config

# Bound fields shown on console lines, in this order, when present
CONTEXT_FIELDS = (
    "operation",
    "product_id",
    "method",
    "path",
    "status_code",
    "duration_ms",
    "error_type",
    "errors",
)


class InterceptHandler(logging.Handler):
    """Redirect standard 'logging' records to Loguru, with selective drops."""

    def emit(self, record: logging.LogRecord) -> None:
        # Request logging middleware replaces uvicorn access logs
        if record.name == "uvicorn.access":
            return

        # The middleware already logs handler exceptions with context
        if record.name == "uvicorn.error" and record.levelno >= logging.ERROR:
            return

        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(
            depth=2,
            exception=record.exc_info,
        ).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def render_context(extra: dict) -> str:
    """Render the catalog's bound fields as ``" | key=value ..."``."""
    pairs = [
        f"{name}={extra[name]}"
        for name in CONTEXT_FIELDS
        if extra.get(name) is not None
    ]
    return " | " + " ".join(pairs) if pairs else ""


def _patch_record(record) -> None:
    record["extra"].setdefault("request_id", "-")
    record["extra"]["context"] = render_context(record["extra"])


def configure_logging():
    main_config = get_config()
    cfg = main_config.logging
    env = main_config.app.environment

    logger.remove()
    logger.configure(extra={"request_id": "-"}, patcher=_patch_record)

    fmt_plain = (
        "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
        "<level>{level: <8}</level> | "
        "[<cyan>{extra[request_id]}</cyan>] | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
        "<level>{message}</level>"
        "<magenta>{extra[context]}</magenta>"
    )
    is_json_file = cfg.format == "json"

    # Variable values in tracebacks only outside production
    backtrace_on = env != "production"
    diagnose_on = env != "production"

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=fmt_plain,
        colorize=True,
        serialize=False,
        backtrace=backtrace_on,
        diagnose=diagnose_on,
        enqueue=False,
    )

    if cfg.file:
        path = Path(cfg.file)
        path.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            str(path),
            level=cfg.level,
            # serialize=True writes the full record, bound fields included
            format="{message}" if is_json_file else fmt_plain,
            serialize=is_json_file,
            rotation=f"{cfg.max_size_mb} MB",
            retention=cfg.backup_count,
            compression="zip",
            enqueue=True,
            backtrace=backtrace_on,
            diagnose=diagnose_on,
        )

    # 'force=True' clears existing handlers; level=0 lets all records through
    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)

    for name in list(logging.root.manager.loggerDict.keys()):
        stdlog = logging.getLogger(name)
        stdlog.handlers = []
        stdlog.propagate = True

    logging.getLogger("uvicorn").setLevel(logging.INFO)
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)
    logging.getLogger("uvicorn.access").setLevel(logging.CRITICAL)

    logger.bind(operation="configure_logging").info(
        "Logging configured: level={} format={} file={!r} environment={}",
        cfg.level,
        cfg.format,
        cfg.file,
        env,
    )
