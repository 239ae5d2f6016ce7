import logging

from sqlalchemy.engine import Engine

from app.db.base import Base, create_db_engine, init_db

logger = logging.getLogger(__name__)


# 创建所有表
def create_tables(engine: Engine) -> None:
    init_db(engine)


# 清空数据库
def reset_db(engine: Engine) -> None:
    from app.models import resources  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    logger.info("数据库表已重建")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    db_engine = create_db_engine()
    try:
        create_tables(db_engine)
        logging.info("数据库表已创建")
    finally:
        db_engine.dispose()
