"""Handler setup for the ``lathecad`` logger hierarchy.

Library modules only call ``logging.getLogger(__name__)``.  Nothing is
printed until an application (the ``lathecad`` command, a demo script)
calls :func:`setup_logging`.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> logging.Logger:
    """Send ``lathecad.*`` records at ``level`` or above to stdout.

    Calling it again replaces the handlers from the previous call.  With
    ``log_file`` the same records are also written to that file, which
    is truncated first.  Returns the ``lathecad`` logger.
    """

    logger = logging.getLogger('lathecad')
    logger.setLevel(level)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT, datefmt='%H:%M:%S')

    stdout = logging.StreamHandler(sys.stdout)
    stdout.setLevel(level)
    stdout.setFormatter(formatter)
    logger.addHandler(stdout)

    if log_file:
        to_file = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        to_file.setLevel(level)
        to_file.setFormatter(formatter)
        logger.addHandler(to_file)

    logger.debug('logging at level %s', logging.getLevelName(level))
    return logger
