"""
Logging setup module.
All diagnostic output goes through the standard logging tree.
"""
import logging
import sys

LOG_FORMAT = '[%(levelname)s] %(name)s - %(message)s'
FILE_LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

def setup_logger(level=logging.INFO):
    """Configure the root logger once."""
    root_logger = logging.getLogger()

    # Handlers already attached (second call, test runner, ...)
    if root_logger.handlers:
        return root_logger

    root_logger.setLevel(level)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root_logger.addHandler(console_handler)

    return root_logger

def add_file_handler(log_file, level=logging.WARNING):
    """Append warnings and errors to a log file next to the user data."""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_file:
            return handler

    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(FILE_LOG_FORMAT))
    root_logger.addHandler(file_handler)
    return file_handler

def get_logger(name):
    """Module logger."""
    return logging.getLogger(name)
