import logging
from logging import Handler, Logger
from pathlib import Path


class ModuleLogger:
    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    # level of the engine loggers until `set_level` is called
    DEFAULT_LEVEL = logging.WARNING

    FORMATTER = logging.Formatter('[%(name)s | %(levelname)s] %(message)s')

    @classmethod
    def _prepare(cls, handler: Handler, log_level: int | None) -> Handler:
        handler.setFormatter(cls.FORMATTER)
        handler.setLevel(log_level or cls.DEBUG)
        return handler

    @classmethod
    def create_console_handler(cls, log_level: int | None = None) -> Handler:
        return cls._prepare(logging.StreamHandler(), log_level)

    @classmethod
    def create_file_handler(cls, file_path: Path | str, log_level: int | None = None) -> Handler:
        # appends, so that a series of ratings ends up in one trace file
        handler = logging.FileHandler(file_path, mode='a', encoding='utf-8')
        return cls._prepare(handler, log_level)

    @classmethod
    def get_logger(
        cls,
        logger_name: str,
        file_path: Path | str | None = None,
        log_level: int | None = None
    ) -> Logger:
        """Returns the logger with `logger_name`, set to `log_level`
        (`DEFAULT_LEVEL` if None).

        Handlers are attached on the first request only: a console handler,
        and a file handler if `file_path` is given.
        """
        logger = logging.getLogger(logger_name)
        if not logger.handlers:
            logger.addHandler(cls.create_console_handler())
            if file_path is not None:
                logger.addHandler(cls.create_file_handler(file_path))
            logger.setLevel(log_level or cls.DEFAULT_LEVEL)
        return logger

    @classmethod
    def set_level(cls, log_level: int, prefix: str = 'hexrating') -> None:
        """Sets `log_level` on every logger of which the name starts with
        `prefix` and on their handlers, e.g. to turn on DEBUG output of all
        rating modules at once.
        """
        manager = logging.Logger.manager
        for name, logger in list(manager.loggerDict.items()):
            if not isinstance(logger, Logger) or not name.startswith(prefix):
                continue
            logger.setLevel(log_level)
            for handler in logger.handlers:
                handler.setLevel(log_level)
