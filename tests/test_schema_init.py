from __future__ import annotations

from unittest import TestCase
from unittest.mock import patch

from sqlalchemy import create_engine, inspect

from app.core.config import Settings
from app.db.base import init_db
from app.db.init_db import reset_db
from app.infrastructure.exceptions import SchemaInitError
from app.models.resources import Task
from app.services.core import ResourceService, build_task_service
from support import make_engine


class SchemaInitializerTests(TestCase):
    def setUp(self) -> None:
        self.engine = make_engine()
        self.addCleanup(self.engine.dispose)

    def test_creates_all_tables_and_is_idempotent(self) -> None:
        init_db(self.engine, Settings())
        init_db(self.engine, Settings())

        tables = set(inspect(self.engine).get_table_names())
        self.assertEqual({"tasks", "ordens_servico", "almoxarifado"}, tables)

        columns = {column["name"] for column in inspect(self.engine).get_columns("tasks")}
        self.assertIn("updated_at", columns)
        self.assertIn("concluida", columns)

    def test_disabled_table_creation_leaves_store_untouched(self) -> None:
        init_db(self.engine, Settings(CREATE_TABLES=False))
        self.assertEqual([], inspect(self.engine).get_table_names())

    def test_failure_is_raised(self) -> None:
        engine = create_engine("sqlite:////nonexistent-dir/operacoes/db.sqlite")
        with self.assertRaises(SchemaInitError):
            init_db(engine, Settings())

    def test_reset_db_empties_tables(self) -> None:
        init_db(self.engine, Settings())
        service = build_task_service()
        service.create(self.engine, {"titulo": "Old"})

        reset_db(self.engine)

        self.assertEqual([], service.list(self.engine))


class ResourceServiceTests(TestCase):
    def test_unknown_fields_are_rejected(self) -> None:
        with self.assertRaises(ValueError):
            ResourceService(Task, fields=("titulo", "nope"), order_by="quando")

    def test_store_defaults_apply_for_rows_inserted_outside_the_api(self) -> None:
        engine = make_engine()
        self.addCleanup(engine.dispose)
        init_db(engine, Settings())

        with engine.begin() as connection:
            connection.exec_driver_sql("INSERT INTO ordens_servico (numero) VALUES ('OS-7')")
        with engine.connect() as connection:
            status = connection.exec_driver_sql("SELECT status FROM ordens_servico").scalar()

        self.assertEqual("open", status)

    def test_create_returns_none_when_store_returns_no_row(self) -> None:
        service = build_task_service()
        with patch.object(ResourceService, "_execute", return_value=[]):
            self.assertIsNone(service.create(object(), {"titulo": "x"}))
