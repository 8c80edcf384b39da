import logging
from logging import DEBUG, INFO, WARNING, ERROR

# Single global logging configuration
logging.basicConfig(
    level = logging.INFO,
    format = "%(asctime)s %(levelname)s %(filename)s func:%(funcName)s line %(lineno)d : %(message)s"
)

def get_logger(name:str,level=None)->logging.Logger:
    """
    args:
        name: logger name
        level: optional level override

    """

    logger = logging.getLogger(name)
    if level:
        logger.setLevel(level)
    return logger
