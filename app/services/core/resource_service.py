import logging
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.infrastructure.exceptions import StoreOperationError

logger = logging.getLogger(__name__)


class ResourceService:
    """
    通用的单表增删改查服务

    每个实体（任务、服务工单、仓库条目）各实例化一次，参数为：
    数据表、可写字段、默认排序列及方向、创建时的缺省值、删除确认消息。
    每个操作只执行一条参数化语句，连接在语句结束后立即归还连接池。
    """

    def __init__(
            self,
            model,
            fields: Iterable[str],
            order_by: str,
            descending: bool = False,
            create_defaults: Optional[Dict[str, Any]] = None,
            delete_message: str = "Registro excluído",
            entity: str = "记录",
    ):
        self.table = model.__table__
        self.fields = tuple(fields)
        self.order_by = order_by
        self.descending = descending
        self.create_defaults = create_defaults or {}
        self.delete_message = delete_message
        self.entity = entity

        unknown = [f for f in (*self.fields, order_by) if f not in self.table.c]
        if unknown:
            raise ValueError(f"数据表 {self.table.name} 不存在字段: {unknown}")

    def _values(self, data: Dict[str, Any]) -> Dict[str, Any]:
        # 全量写入：未提供的字段一律写入 NULL
        return {field: data.get(field) for field in self.fields}

    def _execute(self, engine: Engine, statement):
        """
        在一个独立事务内执行单条语句，返回结果行（字典）列表
        """
        try:
            with engine.begin() as connection:
                result = connection.execute(statement)
                if result.returns_rows:
                    return [dict(row) for row in result.mappings().all()]
                return []
        except SQLAlchemyError as e:
            message = str(getattr(e, "orig", None) or e)
            logger.error(f"{self.entity}数据库操作失败: {message}")
            raise StoreOperationError(message) from e

    def list(self, engine: Engine) -> List[Dict[str, Any]]:
        """
        获取全部记录，按默认列排序，id 作为次级排序保证顺序稳定
        """
        column = self.table.c[self.order_by]
        id_column = self.table.c.id
        if self.descending:
            ordering = (column.desc(), id_column.desc())
        else:
            ordering = (column.asc(), id_column.asc())
        statement = select(self.table).order_by(*ordering)
        return self._execute(engine, statement)

    def create(self, engine: Engine, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        插入一条记录并返回数据库生成的完整行（含 id 与时间戳）
        """
        values = self._values(data)
        for field, default in self.create_defaults.items():
            if values.get(field) is None:
                values[field] = default

        statement = insert(self.table).values(**values).returning(*self.table.c)
        rows = self._execute(engine, statement)
        logger.info(f"创建{self.entity}成功: {rows[0]['id'] if rows else None}")
        return rows[0] if rows else None

    def update(self, engine: Engine, item_id: int, data: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """
        覆盖写入全部可写字段

        带有 onupdate 的列（如任务的 updated_at）同时刷新为当前时间。
        id 不存在时返回 None。
        """
        statement = (
            update(self.table)
            .where(self.table.c.id == item_id)
            .values(**self._values(data))
            .returning(*self.table.c)
        )
        rows = self._execute(engine, statement)
        return rows[0] if rows else None

    def delete(self, engine: Engine, item_id: int) -> str:
        """
        按 id 删除记录；无论是否命中都返回固定的确认消息
        """
        statement = delete(self.table).where(self.table.c.id == item_id)
        self._execute(engine, statement)
        return self.delete_message
