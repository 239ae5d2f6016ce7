from typing import Optional

from pydantic import BaseModel, ConfigDict


class TaskPayload(BaseModel):
    """
    任务创建/更新请求模型

    titulo 在这里不做必填校验，缺失时由数据库的 NOT NULL 约束拒绝
    """
    # 文本列接受数字，按文本存储
    model_config = ConfigDict(coerce_numbers_to_str=True)

    titulo: Optional[str] = None
    quando: Optional[str] = None
    antecedencia: Optional[int] = None
    prioridade: Optional[str] = None
    descricao: Optional[str] = None
    notificar: Optional[int] = None
    concluida: Optional[int] = None


class ServiceOrderPayload(BaseModel):
    """服务工单创建/更新请求模型"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    numero: Optional[str] = None
    cliente: Optional[str] = None
    tecnico: Optional[str] = None
    status: Optional[str] = None


class StockEntryPayload(BaseModel):
    """仓库条目创建/更新请求模型"""
    model_config = ConfigDict(coerce_numbers_to_str=True)

    item: Optional[str] = None
    quantidade: Optional[int] = None
    responsavel: Optional[str] = None
