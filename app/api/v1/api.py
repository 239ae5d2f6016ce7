from fastapi import APIRouter

from app.api.v1.endpoints.resources import build_resource_router
from app.core.config import Settings, settings as default_settings
from app.schemas.resources import ServiceOrderPayload, StockEntryPayload, TaskPayload
from app.services.core import build_resource_services


def build_api_router(config: Settings = default_settings) -> APIRouter:
    """
    组装全部实体路由
    """
    services = build_resource_services(config)
    api_router = APIRouter()

    # 包含各模块的路由
    tasks_router = build_resource_router(services["tasks"], TaskPayload, config)
    api_router.include_router(tasks_router, prefix="/tasks", tags=["tarefas"])

    orders_router = build_resource_router(services["service_orders"], ServiceOrderPayload, config)
    api_router.include_router(orders_router, prefix="/ordens-servico", tags=["ordens de serviço"])
    # 旧版前端使用的短路径
    api_router.include_router(orders_router, prefix="/os", tags=["ordens de serviço"], include_in_schema=False)

    stock_router = build_resource_router(services["stock_entries"], StockEntryPayload, config)
    api_router.include_router(stock_router, prefix="/almoxarifado", tags=["almoxarifado"])

    return api_router
