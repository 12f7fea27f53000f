import logging
import os
from logging.handlers import RotatingFileHandler

from .core.config import settings

FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATEFMT = "%Y-%m-%d %H:%M:%S"


def setup_loggers(level=None, log_dir=None):
    level = (level or settings.log_level).upper()
    log_dir = settings.log_dir if log_dir is None else log_dir

    formatter = logging.Formatter(FORMAT, datefmt=DATEFMT)
    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)

    handlers = [stream_handler]
    error_handlers = [stream_handler]
    access_handlers = []
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)

        def _file(name):
            h = RotatingFileHandler(os.path.join(log_dir, name), maxBytes=10 * 1024 * 1024, backupCount=2)
            h.setFormatter(formatter)
            return h

        handlers.append(_file("shopflow.log"))
        error_handlers.append(_file("error_log.log"))
        access_handlers.append(_file("access_log.log"))

    basic = logging.getLogger("shopflow")
    basic.setLevel(level)
    _replace_handlers(basic, handlers)

    errors = logging.getLogger("errors")
    errors.setLevel(logging.ERROR)
    _replace_handlers(errors, error_handlers)

    # access solo a archivo; sin LOG_DIR queda callado salvo en DEBUG
    access = logging.getLogger("access")
    access.setLevel(logging.INFO)
    _replace_handlers(access, access_handlers or ([stream_handler] if level == "DEBUG" else [logging.NullHandler()]))

    for name in ("shopflow", "errors", "access"):
        logging.getLogger(name).propagate = False

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def _replace_handlers(logger, handlers):
    # idempotente: setup_loggers() puede llamarse más de una vez (tests, reload)
    for h in logger.handlers[:]:
        logger.removeHandler(h)
    for h in handlers:
        logger.addHandler(h)
