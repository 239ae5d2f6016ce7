from fastapi import Request
from sqlalchemy.engine import Engine


def get_engine(request: Request) -> Engine:
    """
    获取数据库引擎的依赖函数

    用于FastAPI依赖注入系统，提供应用启动时创建（或测试时注入）的连接池
    """
    return request.app.state.engine
