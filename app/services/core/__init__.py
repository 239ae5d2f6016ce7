"""
Core Services Module

Provides the table-level CRUD services behind the REST API.
One ``ResourceService`` is configured per entity.
"""

from typing import Dict

from app.core.config import Settings, settings as default_settings
from app.models.resources import ServiceOrder, StockEntry, Task
from app.services.core.resource_service import ResourceService


def build_task_service() -> ResourceService:
    return ResourceService(
        Task,
        fields=("titulo", "quando", "antecedencia", "prioridade", "descricao", "notificar", "concluida"),
        order_by="quando",
        create_defaults={"concluida": 0},
        delete_message="Tarefa excluída",
        entity="任务",
    )


def build_service_order_service() -> ResourceService:
    return ResourceService(
        ServiceOrder,
        fields=("numero", "cliente", "tecnico", "status"),
        order_by="created_at",
        descending=True,
        create_defaults={"status": "open"},
        delete_message="Ordem de serviço excluída",
        entity="服务工单",
    )


def build_stock_entry_service(config: Settings = default_settings) -> ResourceService:
    """
    仓库条目的排序由 STOCK_ORDER 决定：item 按名称升序，recent 按登记时间降序
    """
    if config.STOCK_ORDER == "recent":
        order_by, descending = "data_registro", True
    else:
        order_by, descending = "item", False

    return ResourceService(
        StockEntry,
        fields=("item", "quantidade", "responsavel"),
        order_by=order_by,
        descending=descending,
        delete_message="Item excluído do almoxarifado",
        entity="仓库条目",
    )


def build_resource_services(config: Settings = default_settings) -> Dict[str, ResourceService]:
    return {
        "tasks": build_task_service(),
        "service_orders": build_service_order_service(),
        "stock_entries": build_stock_entry_service(config),
    }


__all__ = [
    "ResourceService",
    "build_task_service",
    "build_service_order_service",
    "build_stock_entry_service",
    "build_resource_services",
]
