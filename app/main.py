from contextlib import asynccontextmanager
import logging
import os
import sys
import traceback

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.v1.api import build_api_router
from app.core.config import Settings, settings as default_settings
from app.db.base import create_db_engine, init_db
from app.infrastructure.response import error_response

# 降低watchfiles日志级别，避免频繁输出
logging.getLogger('watchfiles').setLevel(logging.ERROR)
logging.getLogger('watchfiles.main').setLevel(logging.ERROR)

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{location}: {error.get('msg')}")
    return "; ".join(parts) or "Requisição inválida"


def _resolve_static_file(static_dir: str, full_path: str):
    """
    在静态目录中查找请求的文件，越出静态目录的路径一律视为不存在
    """
    root = os.path.realpath(static_dir)
    candidate = os.path.realpath(os.path.join(root, full_path))
    if candidate != root and not candidate.startswith(root + os.sep):
        return None
    if os.path.isfile(candidate):
        return candidate
    return None


def create_app(engine: Engine = None, config: Settings = default_settings) -> FastAPI:
    """
    创建FastAPI应用

    Args:
        engine: 可选的数据库引擎（连接池）；为空时在启动阶段根据配置创建
        config: 应用配置

    Returns:
        FastAPI: 应用实例
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        应用启动时初始化数据库，失败则终止启动
        """
        owns_engine = app.state.engine is None
        if owns_engine:
            app.state.engine = create_db_engine(config)

        logger.info("正在初始化数据库...")
        try:
            init_db(app.state.engine, config)
            logger.info("数据库初始化成功")
        except Exception as e:
            logger.error(f"数据库初始化失败: {str(e)}")
            logger.error(traceback.format_exc())
            if owns_engine:
                app.state.engine.dispose()
            raise

        yield

        if owns_engine:
            app.state.engine.dispose()
            logger.info("数据库连接池已释放")

    app = FastAPI(
        title=config.PROJECT_NAME,
        version=config.VERSION,
        description="Tarefas, ordens de serviço e almoxarifado",
        lifespan=lifespan,
    )
    app.state.engine = engine

    # 配置CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # 请求体或路径参数无法转换时，与数据库错误一样返回500
    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        message = _validation_message(exc)
        logger.warning(f"请求参数错误 {request.method} {request.url.path}: {message}")
        return error_response(msg=message, code=500)

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return error_response(msg=str(exc.detail), code=exc.status_code)

    # 包含API路由
    app.include_router(build_api_router(config), prefix=config.API_PREFIX)

    @app.get(f"{config.API_PREFIX}/health")
    async def health():
        """健康检查接口"""
        return {"status": "online", "version": config.VERSION}

    # 静态前端：存在的文件直接返回，其余非API路径回退到 index.html
    @app.get("/{full_path:path}", include_in_schema=False)
    async def frontend(full_path: str):
        api_root = config.API_PREFIX.strip("/")
        if full_path == api_root or full_path.startswith(api_root + "/"):
            return error_response(msg="Not Found", code=404)

        static_file = _resolve_static_file(config.STATIC_DIR, full_path)
        if static_file:
            return FileResponse(static_file)

        index_file = _resolve_static_file(config.STATIC_DIR, "index.html")
        if index_file:
            return FileResponse(index_file)
        return error_response(msg="Not Found", code=404)

    return app


app = create_app()
