# dexpricing/core/logging.py
"""
Centralized logging for the pricing package.

Provides:
- PricingLogger: Global logging configuration
- LoggingMixin: Consistent logging behavior for classes
- log_with_context: Attach structured context to a single record
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Optional

DEBUG = logging.DEBUG
INFO = logging.INFO
WARNING = logging.WARNING

ROOT_LOGGER_NAME = 'dexpricing'


class PricingFormatter(logging.Formatter):
    # rendered in this order, anything else attached to a record is dropped
    context_attrs = (
        # pricing inputs and results
        'network', 'token_address', 'pool_address', 'anchor_address',
        'branch', 'eth_price', 'result', 'error',
        # configuration
        'config_file', 'native_token', 'whitelist_size', 'min_lp_count',
        'factory_address',
        # snapshots and lookups
        'snapshot', 'token_count', 'pool_count', 'has_bundle', 'pair_lookup',
    )

    def __init__(self, include_context: bool = False):
        self.include_context = include_context
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        base_msg = f"{timestamp} - {record.name} - {record.levelname} - {record.getMessage()}"

        if not self.include_context:
            return base_msg

        context_parts = [
            f"{attr}={getattr(record, attr)}"
            for attr in self.context_attrs
            if hasattr(record, attr)
        ]
        if context_parts:
            return f"{base_msg} | {' '.join(context_parts)}"
        return base_msg


def _console_handler(level: int, structured_format: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if structured_format:
        handler.setFormatter(PricingFormatter(include_context=True))
    else:
        handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    return handler


def _file_handlers(log_dir: Path, level: int) -> List[logging.Handler]:
    """pricing.log at the configured level, pricing_errors.log for ERROR and above"""
    log_dir.mkdir(parents=True, exist_ok=True)
    formatter = PricingFormatter(include_context=True)

    handlers = []
    for filename, handler_level in (('pricing.log', level), ('pricing_errors.log', logging.ERROR)):
        handler = logging.FileHandler(log_dir / filename)
        handler.setLevel(handler_level)
        handler.setFormatter(formatter)
        handlers.append(handler)
    return handlers


class PricingLogger:
    """Global logging configuration and management"""

    _configured = False

    @classmethod
    def configure(cls,
                  log_dir: Optional[Path] = None,
                  log_level: str = "INFO",
                  console_enabled: bool = True,
                  file_enabled: bool = False,
                  structured_format: bool = True,
                  force: bool = False) -> None:
        """
        Install handlers on the 'dexpricing' logger.

        A second call is a no-op unless force is set, in which case existing
        handlers are closed and replaced.
        """
        if cls._configured and not force:
            return

        level = logging.getLevelName(log_level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {log_level}")

        cls.reset()
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.setLevel(level)

        if console_enabled:
            root_logger.addHandler(_console_handler(level, structured_format))
        if file_enabled and log_dir:
            for handler in _file_handlers(Path(log_dir), level):
                root_logger.addHandler(handler)

        cls._configured = True

    @classmethod
    def reset(cls) -> None:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        root_logger.setLevel(logging.NOTSET)
        cls._configured = False

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        if not name.startswith(ROOT_LOGGER_NAME):
            name = f'{ROOT_LOGGER_NAME}.{name}'
        return logging.getLogger(name)


def log_with_context(logger: logging.Logger, level: int, message: str, **context) -> None:
    if logger.isEnabledFor(level):
        record = logger.makeRecord(logger.name, level, "", 0, message, (), None)
        for key, value in context.items():
            setattr(record, key, value)
        logger.handle(record)


class LoggingMixin:
    """Adds a class-scoped logger named after the defining module and class"""

    @property
    def logger(self) -> logging.Logger:
        if not hasattr(self, '_logger'):
            module = self.__class__.__module__
            prefix = f'{ROOT_LOGGER_NAME}.'
            if module.startswith(prefix):
                module = module[len(prefix):]
            self._logger = PricingLogger.get_logger(f"{module}.{self.__class__.__name__}")
        return self._logger

    def log_debug(self, message: str, **context) -> None:
        log_with_context(self.logger, DEBUG, message, **context)

    def log_info(self, message: str, **context) -> None:
        log_with_context(self.logger, INFO, message, **context)
