from __future__ import annotations

from unittest import TestCase

from pydantic import ValidationError

from app.core.config import Settings, normalize_database_url


class DatabaseUrlTests(TestCase):
    def test_postgres_scheme_is_mapped_to_psycopg2(self) -> None:
        self.assertEqual(
            "postgresql+psycopg2://u:p@db.example.com:5432/app",
            normalize_database_url("postgres://u:p@db.example.com:5432/app"),
        )
        self.assertEqual(
            "postgresql+psycopg2://u:p@db/app",
            normalize_database_url("postgresql://u:p@db/app"),
        )

    def test_other_urls_are_untouched(self) -> None:
        self.assertEqual("sqlite:///tmp/app.db", normalize_database_url("sqlite:///tmp/app.db"))
        self.assertEqual(
            "postgresql+psycopg2://u:p@db/app",
            normalize_database_url("postgresql+psycopg2://u:p@db/app"),
        )

    def test_uri_is_assembled_from_parts_without_database_url(self) -> None:
        config = Settings(DATABASE_URL=None, DB_HOST="db", DB_PORT="6543", DB_USER="ops", DB_PASSWORD="pw", DB_NAME="ops")
        self.assertEqual("postgresql+psycopg2://ops:pw@db:6543/ops", config.SQLALCHEMY_DATABASE_URI)


class EngineOptionsTests(TestCase):
    def test_self_signed_certificates_are_accepted_by_default(self) -> None:
        config = Settings(DATABASE_URL="postgres://u:p@db/app")
        options = config.ENGINE_OPTIONS

        self.assertEqual({"sslmode": "require"}, options["connect_args"])
        self.assertEqual(10, options["pool_size"])
        self.assertTrue(options["pool_pre_ping"])

    def test_strict_tls_and_connect_timeout(self) -> None:
        config = Settings(
            DATABASE_URL="postgres://u:p@db/app",
            DB_SSL_REJECT_UNAUTHORIZED=True,
            DB_CONNECT_TIMEOUT=5,
        )

        self.assertEqual(
            {"sslmode": "verify-full", "connect_timeout": 5},
            config.ENGINE_OPTIONS["connect_args"],
        )

    def test_ssl_can_be_disabled(self) -> None:
        config = Settings(DATABASE_URL="postgres://u:p@localhost/app", DB_SSL=False)
        self.assertEqual({}, config.ENGINE_OPTIONS["connect_args"])

    def test_sqlite_gets_no_pool_sizing(self) -> None:
        config = Settings(DATABASE_URL="sqlite:///tmp/app.db")
        self.assertEqual({"pool_pre_ping": True}, config.ENGINE_OPTIONS)


class SettingsTests(TestCase):
    def test_defaults(self) -> None:
        config = Settings()
        self.assertEqual(3000, Settings.model_fields["PORT"].default)
        self.assertEqual("/api", config.API_PREFIX)
        self.assertFalse(config.STRICT_NOT_FOUND)
        self.assertTrue(config.EXPOSE_STORE_ERRORS)

    def test_cors_origins_accepts_comma_separated_string(self) -> None:
        config = Settings(CORS_ORIGINS="http://a.example, http://b.example")
        self.assertEqual(["http://a.example", "http://b.example"], config.CORS_ORIGINS)

    def test_unknown_stock_order_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(STOCK_ORDER="random")
