import os
import json
from typing import Any, Dict, List, Optional, Union

from dotenv import load_dotenv
from pydantic_settings import BaseSettings
from pydantic import field_validator

project_root = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
env_path = os.path.join(project_root, '.env')
load_dotenv(env_path)


class Settings(BaseSettings):
    # 基本设置
    API_PREFIX: str = "/api"
    PROJECT_NAME: str = "Operacoes API"
    VERSION: str = "0.1.0"

    # CORS 设置
    CORS_ORIGINS: List[str] = ["*"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v: Union[str, List[str]]) -> List[str]:
        if isinstance(v, str):
            # 如果是一个字符串，尝试将其解析为JSON数组
            try:
                return json.loads(v)
            except json.JSONDecodeError:
                # 普通的逗号分隔字符串
                return [i.strip() for i in v.split(",") if i.strip()]

        if isinstance(v, list):
            return v

        return []

    # 数据库设置
    DB_HOST: str = "localhost"
    DB_PORT: str = "5432"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "operacoes"

    # 完整连接串，优先于上面的分项配置
    DATABASE_URL: Optional[str] = None

    # TLS：默认启用但不校验证书（允许自签名证书）
    DB_SSL: bool = True
    DB_SSL_REJECT_UNAUTHORIZED: bool = False

    # 连接池设置
    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 3600
    DB_POOL_TIMEOUT: int = 30
    DB_CONNECT_TIMEOUT: Optional[int] = None

    @property
    def SQLALCHEMY_DATABASE_URI(self) -> str:
        """
        获取数据库URI
        """
        if self.DATABASE_URL:
            return normalize_database_url(self.DATABASE_URL)

        # 默认使用PostgreSQL
        return f"postgresql+psycopg2://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

    @property
    def ENGINE_OPTIONS(self) -> Dict[str, Any]:
        """
        获取创建引擎时的参数（连接池与驱动参数）
        """
        uri = self.SQLALCHEMY_DATABASE_URI
        if uri.startswith("sqlite"):
            return {"pool_pre_ping": True}

        connect_args: Dict[str, Any] = {}
        if self.DB_SSL:
            connect_args["sslmode"] = "verify-full" if self.DB_SSL_REJECT_UNAUTHORIZED else "require"
        if self.DB_CONNECT_TIMEOUT:
            connect_args["connect_timeout"] = self.DB_CONNECT_TIMEOUT

        return {
            "pool_pre_ping": True,
            "pool_size": self.DB_POOL_SIZE,
            "max_overflow": self.DB_MAX_OVERFLOW,
            "pool_recycle": self.DB_POOL_RECYCLE,
            "pool_timeout": self.DB_POOL_TIMEOUT,
            "connect_args": connect_args,
        }

    # 是否自动创建数据库表结构
    CREATE_TABLES: bool = True

    # 静态前端目录
    STATIC_DIR: str = os.path.join(project_root, "public")

    # 仓库条目的默认排序：item（按名称升序）或 recent（按登记时间降序）
    STOCK_ORDER: str = "item"

    @field_validator("STOCK_ORDER")
    @classmethod
    def check_stock_order(cls, v: str) -> str:
        if v not in ("item", "recent"):
            raise ValueError(f"不支持的排序方式: {v}")
        return v

    # 更新不存在的记录时返回404（默认返回空结果）
    STRICT_NOT_FOUND: bool = False
    # 是否把数据库原始错误信息返回给调用方
    EXPOSE_STORE_ERRORS: bool = True

    # 服务器启动配置
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    RELOAD: bool = False

    # 日志配置
    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    class Config:
        case_sensitive = True
        env_file = ".env"


def normalize_database_url(url: str) -> str:
    """
    将 postgres:// 形式的连接串转换为 SQLAlchemy 可识别的驱动写法
    """
    for prefix in ("postgres://", "postgresql://"):
        if url.startswith(prefix):
            return "postgresql+psycopg2://" + url[len(prefix):]
    return url


# 创建设置实例
settings = Settings()
