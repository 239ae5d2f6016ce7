"""
实体增删改查API接口模块

任务、服务工单、仓库条目三组接口形状完全一致，由 build_resource_router
根据 ResourceService 与请求模型生成：

    GET    /            列表（实体默认排序）
    POST   /            创建，返回新记录
    PUT    /{item_id}   全量更新，返回更新后的记录（不存在时为 null）
    DELETE /{item_id}   删除，返回固定确认消息

所有数据库错误统一返回 500 与 {"error": "..."}。
"""
import logging
from typing import Type

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.engine import Engine

from app.core.config import Settings, settings as default_settings
from app.db.session import get_engine
from app.infrastructure.exceptions import StoreOperationError
from app.infrastructure.response import error_response, message_response, not_found_response
from app.services.core.resource_service import ResourceService

# 配置日志记录器
logger = logging.getLogger(__name__)

OPAQUE_ERROR_MESSAGE = "Erro interno do servidor"


def build_resource_router(
        service: ResourceService,
        payload_model: Type[BaseModel],
        config: Settings = default_settings,
) -> APIRouter:
    """
    为一个实体生成路由

    Args:
        service: 该实体的表级服务
        payload_model: 创建/更新请求体模型
        config: 控制未命中更新与错误信息暴露的配置

    Returns:
        APIRouter: 包含四个接口的路由实例
    """
    router = APIRouter()

    def store_error(e: StoreOperationError):
        if config.EXPOSE_STORE_ERRORS:
            return error_response(msg=e.message, code=500)
        return error_response(msg=OPAQUE_ERROR_MESSAGE, code=500)

    # 获取列表接口（带或不带末尾斜杠）
    @router.get("")
    @router.get("/", include_in_schema=False)
    def list_items(engine: Engine = Depends(get_engine)):
        try:
            return service.list(engine)
        except StoreOperationError as e:
            return store_error(e)

    # 创建接口
    @router.post("")
    @router.post("/", include_in_schema=False)
    def create_item(
            payload: payload_model,  # 请求体数据
            engine: Engine = Depends(get_engine),
    ):
        try:
            return service.create(engine, payload.model_dump())
        except StoreOperationError as e:
            return store_error(e)

    # 全量更新接口
    @router.put("/{item_id}")
    def update_item(
            item_id: int,  # 记录ID，从URL路径中提取
            payload: payload_model,
            engine: Engine = Depends(get_engine),
    ):
        try:
            row = service.update(engine, item_id, payload.model_dump())
        except StoreOperationError as e:
            return store_error(e)

        if row is None:
            logger.warning(f"{service.entity} {item_id} 不存在，未更新任何记录")
            if config.STRICT_NOT_FOUND:
                return not_found_response(entity="Registro")
        return row

    # 删除接口
    @router.delete("/{item_id}")
    def delete_item(
            item_id: int,
            engine: Engine = Depends(get_engine),
    ):
        try:
            return message_response(service.delete(engine, item_id))
        except StoreOperationError as e:
            return store_error(e)

    return router
