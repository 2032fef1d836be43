"""Logging setup for applications embedding the user account store."""

import logging
from typing import Optional

from pythonjsonlogger import jsonlogger

from . import config


def setup_logger(level: Optional[int] = None,
                 json: Optional[bool] = None) -> logging.Logger:
    """
    Attach a stream handler to the ``amo.users`` logger.

    Calling this again only updates the level; the handler installed by the
    first call is kept.

    Parameters
    ----------
    level : int
        Defaults to :data:`.config.LOGLEVEL`.
    json : bool
        Use a JSON formatter. Defaults to :data:`.config.LOG_JSON`.

    Returns
    -------
    :class:`logging.Logger`

    """
    if level is None:
        level = config.LOGLEVEL
    if json is None:
        json = config.LOG_JSON

    logger = logging.getLogger(__name__.rsplit('.', 1)[0])
    logger.setLevel(level)
    if logger.handlers:
        return logger

    logHandler = logging.StreamHandler()
    if json:
        formatter: logging.Formatter = jsonlogger.JsonFormatter(
            '%(asctime)s %(levelname)s %(name)s %(message)s',
            rename_fields={'levelname': 'level', 'asctime': 'timestamp'}
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s %(levelname)s %(name)s %(message)s'
        )
    logHandler.setFormatter(formatter)
    logger.addHandler(logHandler)
    return logger
