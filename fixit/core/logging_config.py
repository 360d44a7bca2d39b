"""
Logging configuration

Structured log output to the console, a daily text file and a daily JSON file.
"""

import logging
import sys
from datetime import datetime, timezone
from pythonjsonlogger.json import JsonFormatter

from fixit.core.config import settings

LOG_LEVEL = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)
LOG_DIR = settings.LOG_DIR


class CustomJsonFormatter(JsonFormatter):
    """Business log record format"""

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)

        # fixed fields
        log_record['logType'] = 'business'
        log_record['businessType'] = 'fixit'
        log_record['source'] = 'fixit'
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        if not log_record.get('operationTime'):
            log_record['operationTime'] = datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ')

        # business fields arrive through `extra=`
        log_record['operationObject'] = log_record.get('operationObject', message_dict.get('operationObject', ''))
        log_record['operationType'] = log_record.get('operationType', message_dict.get('operationType', ''))
        log_record['operator'] = log_record.get('operator', message_dict.get('operator', 'system'))
        log_record['result'] = log_record.get('result', message_dict.get('result', 'success'))
        log_record['remark'] = log_record.get('remark', message_dict.get('remark', ''))

        for key in ('timestamp', 'name', 'pathname', 'filename', 'lineno', 'funcName',
                    'created', 'msecs', 'relativeCreated', 'thread', 'threadName',
                    'processName', 'process'):
            log_record.pop(key, None)


def setup_logging():
    """Configure the root logger"""

    logger = logging.getLogger()
    logger.setLevel(LOG_LEVEL)

    logger.handlers.clear()

    LOG_DIR.mkdir(parents=True, exist_ok=True)
    today = datetime.now().strftime("%Y%m%d")

    # 1. console
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(LOG_LEVEL)
    console_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # 2. JSON file (structured)
    json_file_handler = logging.FileHandler(
        LOG_DIR / f'fixit_{today}.json.log',
        encoding='utf-8'
    )
    json_file_handler.setLevel(LOG_LEVEL)
    json_file_handler.setFormatter(CustomJsonFormatter('%(message)s'))
    logger.addHandler(json_file_handler)

    # 3. plain text file
    text_file_handler = logging.FileHandler(
        LOG_DIR / f'fixit_{today}.log',
        encoding='utf-8'
    )
    text_file_handler.setLevel(LOG_LEVEL)
    text_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    text_file_handler.setFormatter(text_formatter)
    logger.addHandler(text_file_handler)

    # keep third-party loggers quiet
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)

    return logger


def get_logger(name: str = None):
    """Return a named logger"""
    return logging.getLogger(name or __name__)
