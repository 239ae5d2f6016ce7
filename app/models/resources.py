from sqlalchemy import Column, INTEGER, TEXT, DateTime, func

from app.db.base import Base, get_now


class Task(Base):
    """
    任务（提醒）数据库模型

    存储计划任务，列表按计划时间 quando 升序
    """
    __tablename__ = "tasks"

    id = Column(INTEGER, primary_key=True, autoincrement=True)
    titulo = Column(TEXT, nullable=False)
    quando = Column(TEXT, nullable=True)  # 计划时间，客户端传入的文本
    antecedencia = Column(INTEGER, nullable=True)  # 提前提醒量
    prioridade = Column(TEXT, nullable=True)
    descricao = Column(TEXT, nullable=True)
    notificar = Column(INTEGER, nullable=True)  # 是否提醒：0/1
    concluida = Column(INTEGER, default=0, server_default="0")  # 是否完成：0/1
    created_at = Column(DateTime(timezone=True), default=get_now, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=get_now, onupdate=get_now, server_default=func.now())


class ServiceOrder(Base):
    """
    服务工单数据库模型

    列表按创建时间降序
    """
    __tablename__ = "ordens_servico"

    id = Column(INTEGER, primary_key=True, autoincrement=True)
    numero = Column(TEXT, nullable=True)
    cliente = Column(TEXT, nullable=True)
    tecnico = Column(TEXT, nullable=True)
    status = Column(TEXT, default="open", server_default="open")
    created_at = Column(DateTime(timezone=True), default=get_now, server_default=func.now())


class StockEntry(Base):
    """
    仓库（almoxarifado）登记条目数据库模型
    """
    __tablename__ = "almoxarifado"

    id = Column(INTEGER, primary_key=True, autoincrement=True)
    item = Column(TEXT, nullable=True)
    quantidade = Column(INTEGER, nullable=True)
    responsavel = Column(TEXT, nullable=True)
    data_registro = Column(DateTime(timezone=True), default=get_now, server_default=func.now())
