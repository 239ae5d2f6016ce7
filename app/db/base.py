import logging
from datetime import datetime, timezone

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base

from app.core.config import Settings, settings as default_settings
from app.infrastructure.exceptions import SchemaInitError

logger = logging.getLogger(__name__)


# 获取当前时间（UTC），作为服务端分配的时间戳
def get_now():
    """获取当前的UTC时间"""
    return datetime.now(timezone.utc)


# 创建基本模型类
Base = declarative_base()


# 创建数据库引擎
def create_db_engine(config: Settings = default_settings) -> Engine:
    """
    根据配置创建数据库引擎（连接池）

    引擎在进程生命周期内共享，由应用启动时创建、关闭时释放
    """
    return create_engine(
        config.SQLALCHEMY_DATABASE_URI,
        # 启用回显SQL语句，便于调试
        echo=False,
        **config.ENGINE_OPTIONS,
    )


# 创建数据库表
def init_db(engine: Engine, config: Settings = default_settings) -> None:
    """
    初始化数据库，如果表不存在则创建

    每张表单独执行一次 CREATE TABLE IF NOT EXISTS，可在每次启动时重复执行。
    失败时抛出 SchemaInitError，由应用启动流程终止进程。
    """
    if not config.CREATE_TABLES:
        logger.info("自动创建表功能已禁用")
        return

    # 确保模型已注册到 Base.metadata
    from app.models import resources  # noqa: F401

    for table in Base.metadata.sorted_tables:
        try:
            with engine.begin() as connection:
                table.create(bind=connection, checkfirst=True)
            logger.info(f"数据表 '{table.name}' 已检查/创建")
        except SQLAlchemyError as e:
            logger.error(f"创建数据表 '{table.name}' 失败: {str(e)}")
            raise SchemaInitError(f"创建数据表 '{table.name}' 失败: {str(e)}") from e
