# Reporter: four channels (error, warning, info, always) on one logger
#   ERROR goes to stderr, everything else to stdout
#   ALWAYS sits above CRITICAL so LOG_LEVEL can never hide it

import logging
import os
import sys

LOGGER_NAME = 'gcs_tools'                                   # parent of every module logger in the package
PREFIX = '(GCS-Bucket-Loader)'
ALWAYS = logging.CRITICAL + 10

logging.addLevelName(ALWAYS, 'ALWAYS')

class _BelowError(logging.Filter):

    def filter(self, record):
        return record.levelno < logging.ERROR or record.levelno == ALWAYS

class _ErrorOnly(logging.Filter):

    def filter(self, record):
        return logging.ERROR <= record.levelno < ALWAYS

class ReportFormatter(logging.Formatter):

    def __init__(self):
        super().__init__(PREFIX + ' %(levelname)s: %(asctime)s.%(msecs)03d %(filename)s:%(lineno)d: %(message)s',
                         datefmt='%Y/%m/%d %H:%M:%S')

def configure_logging(level=None, stdout=None, stderr=None):

    env_level = level or os.getenv('LOG_LEVEL', 'INFO')
    resolved_level = getattr(logging, env_level.upper(), logging.INFO)

    out_handler = logging.StreamHandler(stream=stdout or sys.stdout)
    out_handler.addFilter(_BelowError())
    err_handler = logging.StreamHandler(stream=stderr or sys.stderr)
    err_handler.addFilter(_ErrorOnly())

    for handler in (out_handler, err_handler): handler.setFormatter(ReportFormatter())

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.addHandler(out_handler)
    logger.addHandler(err_handler)
    logger.setLevel(resolved_level)

    for noisy in ('google', 'urllib3'): logging.getLogger(noisy).setLevel(logging.WARNING)
    logging.captureWarnings(True)

    return logger

def get_reporter():

    return logging.getLogger(LOGGER_NAME)

def always(msg, *args):

    get_reporter().log(ALWAYS, msg, *args, stacklevel=2)

def duration_line(seconds):

    return 'BYE MSG: All done in {:.1f}s, bye!'.format(seconds)
