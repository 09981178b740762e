import logging
import sys

def setup_logger(name: str) -> logging.Logger:
    """stdout 핸들러가 붙은 INFO 로거"""
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(logging.INFO)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))
        logger.addHandler(handler)

    return logger

app_logger = setup_logger("app")
auth_logger = setup_logger("auth")
db_logger = setup_logger("db")
