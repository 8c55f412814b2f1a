# This file is part of ubuntunet. See LICENSE file for license information.

import logging
import sys
import time

DEFAULT_LOG_FORMAT = "%(asctime)s - %(filename)s[%(levelname)s]: %(message)s"


def setup_basic_logging(level=logging.DEBUG):
    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)
    root = logging.getLogger()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    console.setLevel(level)
    root.addHandler(console)
    root.setLevel(level)


def reset_logging():
    """Remove all current handlers and unset log level."""
    log = logging.getLogger()
    handlers = list(log.handlers)
    for h in handlers:
        h.flush()
        h.close()
        log.removeHandler(h)
    log.setLevel(logging.NOTSET)


def configure_root_logger(level=logging.WARNING):
    """Customize the root logger for ubuntunet"""

    # Always format logging timestamps as UTC time
    logging.Formatter.converter = time.gmtime
    reset_logging()
    setup_basic_logging(level=level)
