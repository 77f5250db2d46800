import logging

import colorlog

LOG = logging.getLogger("calcir")

loggers = [LOG]


def init_logging(dbg: bool):
    level = logging.DEBUG if dbg else logging.INFO
    handler = colorlog.StreamHandler()
    handler.setFormatter(
        colorlog.ColoredFormatter(
            "%(log_color)s%(levelname)-7s [%(filename)s:%(lineno)d] %(message)s"
        )
    )
    for logger in loggers:
        logger.setLevel(level)
        logger.handlers.clear()
        logger.addHandler(handler)
