import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.config_loader import ConfigLoader

DEFAULT_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s - %(funcName)s - %(message)s'
DEFAULT_LOG_FILE = 'logs/selenium_testcase.log'


def _configure_handler(handler: logging.Handler, handler_config: Dict[str, Any], level: int, fmt: str) -> logging.Handler:
    level_name = str(handler_config.get('level', '')).upper()
    handler.setLevel(getattr(logging, level_name, level) if level_name else level)
    handler.setFormatter(logging.Formatter(handler_config.get('format', fmt)))
    return handler


def _build_file_handler(file_config: Dict[str, Any]) -> Optional[logging.Handler]:
    """
    File handler for the 'file_handler' block. Rotates by size when
    'max_bytes' is positive; returns None if the log directory cannot be created.
    """
    log_file_path = Path(file_config.get('path', DEFAULT_LOG_FILE))
    if not log_file_path.is_absolute():
        log_file_path = Path.cwd() / log_file_path
    try:
        log_file_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        # Logger is not usable yet
        print(f"Error: Could not create log directory {log_file_path.parent}. File logging disabled. Error: {e}", file=sys.stderr)
        return None

    max_bytes = int(file_config.get('max_bytes', 0))
    if max_bytes > 0:
        return logging.handlers.RotatingFileHandler(
            log_file_path, maxBytes=max_bytes, backupCount=int(file_config.get('backup_count', 5)), encoding='utf-8'
        )
    return logging.FileHandler(log_file_path, encoding='utf-8')


def setup_logger(config_loader: Optional[ConfigLoader] = None, logger_name: Optional[str] = None) -> logging.Logger:
    """
    Configures a logger (root logger by default) from the 'logging' block of the settings.

    Handlers added by an earlier call for the same logger are closed and replaced.
    Named loggers propagate to the root logger unless 'propagate' is false, so
    test runners that capture root output still see them.
    """
    if config_loader is None:
        config_loader = ConfigLoader()

    level_name = str(config_loader.get_logging_setting('level', 'INFO')).upper()
    level = getattr(logging, level_name, logging.INFO)
    fmt = config_loader.get_logging_setting('format', DEFAULT_LOG_FORMAT)

    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    if logger_name is not None:
        logger.propagate = bool(config_loader.get_logging_setting('propagate', True))

    console_config = config_loader.get_logging_setting('console_handler', {}) or {}
    if console_config.get('enabled', True):
        logger.addHandler(_configure_handler(logging.StreamHandler(sys.stdout), console_config, level, fmt))

    file_config = config_loader.get_logging_setting('file_handler', {}) or {}
    if file_config.get('enabled', False):
        file_handler = _build_file_handler(file_config)
        if file_handler is not None:
            logger.addHandler(_configure_handler(file_handler, file_config, level, fmt))

    if not logger.handlers:
        logger.addHandler(logging.NullHandler())

    return logger
