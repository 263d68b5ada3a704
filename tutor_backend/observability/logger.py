"""
Root logger setup for the Lambda functions.

Records go to stdout, which the Lambda runtime forwards to CloudWatch.

Dependencies: logging (stdlib)
System role: Cold-start logging configuration
"""

import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
NOISY_LOGGERS = ("boto3", "botocore", "urllib3", "httpx", "httpcore")


def configure_logging(level: str = "INFO") -> None:
    """
    Send every record at ``level`` or above to stdout.

    Existing root handlers, including the one the Lambda runtime installs,
    are replaced so repeated calls never duplicate lines.

    Args:
        level: Root log level name
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root_logger.addHandler(stream_handler)
    root_logger.setLevel(level.upper())

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
