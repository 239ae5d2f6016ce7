#!/usr/bin/env python3
import logging
import os
from datetime import datetime

import uvicorn

from app.core.config import settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def setup_logging(log_dir: str = settings.LOG_DIR, level: str = settings.LOG_LEVEL) -> str:
    """
    配置根日志：控制台 + 按启动时间命名的日志文件

    Returns:
        str: 日志文件路径
    """
    os.makedirs(log_dir, exist_ok=True)
    log_filename = os.path.join(log_dir, f"app_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log")

    formatter = logging.Formatter(LOG_FORMAT)
    handlers = [
        logging.StreamHandler(),
        logging.FileHandler(log_filename, encoding='utf-8'),
    ]

    root = logging.getLogger()
    root.setLevel(level)
    # 清除可能已存在的处理器，然后添加新的处理器
    root.handlers = []
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root.addHandler(handler)

    return log_filename


if __name__ == "__main__":
    log_file = setup_logging()
    logger = logging.getLogger("run")
    logger.info(f"启动API服务 - 监听 {settings.HOST}:{settings.PORT}")
    logger.info(f"日志文件路径: {log_file}")
    # log_config=None：沿用上面配置的根日志，不让uvicorn覆盖
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT, reload=settings.RELOAD, log_config=None)
