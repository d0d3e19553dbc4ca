import logging
import datetime
from pathlib import Path

from src.utils.path import path_dic

logger_cache = {}


def get_logger(name):
    """
    :param name:
        모듈 이름
    :return:
        로거 객체
    """

    log_path = Path(path_dic["logs"]).joinpath(name)

    cache_key = (name, log_path)
    if cache_key in logger_cache:
        return logger_cache[cache_key]

    if not log_path.exists():
        log_path.mkdir(parents=True, exist_ok=True)

    # root 로거와 분리
    new_logger = logging.getLogger(name)
    new_logger.handlers.clear()

    log_filename = log_path.joinpath(
        f"{name}-{datetime.datetime.now().strftime('%Y-%m-%d')}.txt"
    )
    file_handler = logging.FileHandler(log_filename, encoding='utf-8')
    file_handler.setLevel(logging.INFO)

    formatter = logging.Formatter(
        '[%(levelname)s][%(asctime)s][%(filename)s:%(lineno)d] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    new_logger.addHandler(file_handler)
    new_logger.addHandler(console_handler)
    new_logger.setLevel(logging.INFO)

    # root 로거로의 전파 차단
    new_logger.propagate = False

    logger_cache[cache_key] = new_logger

    return new_logger
