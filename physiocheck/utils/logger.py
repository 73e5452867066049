import sys
import logging

from physiocheck.config import LOG_LEVEL

# --------------------------------------------------------
# Shared "physiocheck" logger, level from PHYSIOCHECK_LOG_LEVEL
# --------------------------------------------------------
LOGGER_NAME = "physiocheck"
logger = logging.getLogger(LOGGER_NAME)
logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(
        '[%(asctime)s] [%(levelname)s] %(message)s',
        datefmt='%H:%M:%S'
    ))
    logger.addHandler(handler)

# Host application owns the root logger
logger.propagate = False


def debug(msg):
    logger.debug(msg)

def info(msg):
    logger.info(msg)

def warn(msg):
    logger.warning(msg)

def error(msg):
    logger.error(msg)


def log(msg):
    """Plain info-level line."""
    logger.info(msg)
