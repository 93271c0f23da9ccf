import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from flask.logging import default_handler


LOGGER_NAME = 'vidtube'


def setup_logger(app=None, log_level=None, log_dir='logs'):
    if log_level is None:
        log_level = logging.INFO

    if app:
        logger = app.logger
        logger.setLevel(log_level)
        #NOTE: Flask 기본 stderr 핸들러 대신 아래 핸들러를 사용
        logger.removeHandler(default_handler)
    else:
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(log_level)

    #NOTE: 서비스/레포지토리 로거(vidtube.*)도 같은 레벨로 맞춘다
    logging.getLogger(LOGGER_NAME).setLevel(log_level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        fmt='[%(asctime)s] %(levelname)s in %(name)s (%(filename)s:%(lineno)d): %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    handlers = [console_handler]

    #NOTE: 파일 핸들러 - 10MB 단위 로테이션, 최대 5개 파일
    if log_dir:
        log_path = Path(log_dir)
        log_path.mkdir(exist_ok=True)

        file_handler = RotatingFileHandler(
            log_path / 'vidtube.log',
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(log_level)
        file_handler.setFormatter(formatter)

        error_handler = RotatingFileHandler(
            log_path / 'error.log',
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)

        handlers.extend([file_handler, error_handler])

    for handler in handlers:
        logger.addHandler(handler)

    if logger is not logging.getLogger(LOGGER_NAME):
        vidtube_logger = logging.getLogger(LOGGER_NAME)
        if not vidtube_logger.handlers:
            for handler in handlers:
                vidtube_logger.addHandler(handler)

    return logger


def get_logger(name=None):
    if name:
        return logging.getLogger(f'{LOGGER_NAME}.{name}')
    return logging.getLogger(LOGGER_NAME)
