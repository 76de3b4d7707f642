"""Tests for the dealerdesk CLI."""

import asyncio
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import pytest
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from typer.testing import CliRunner

from dealerdesk import __version__
from dealerdesk.cli import app
from dealerdesk.models import Base, Tenant, User
from tests.factories import DEFAULT_PASSWORD


runner = CliRunner()


@pytest.fixture
def cli_db(tmp_path, monkeypatch):
    """Point the commands at a throwaway SQLite file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}", poolclass=NullPool)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def create_schema() -> None:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    asyncio.run(create_schema())

    @asynccontextmanager
    async def session_scope() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    monkeypatch.setattr("dealerdesk.commands.db.session_scope", session_scope)

    def query(stmt):
        async def _query():
            async with factory() as session:
                return (await session.execute(stmt)).scalars().all()

        return asyncio.run(_query())

    yield query

    asyncio.run(engine.dispose())


def test_version():
    result = runner.invoke(app, ["--version"])

    assert result.exit_code == 0
    assert __version__ in result.output


class TestTenantsCommand:
    def test_create_derives_slug(self, cli_db):
        result = runner.invoke(app, ["tenants", "create", "Acme Copiers"])

        assert result.exit_code == 0
        assert "Created tenant" in result.output
        assert "acme-copiers" in result.output
        tenants = cli_db(select(Tenant))
        assert [(t.name, t.slug, t.is_active) for t in tenants] == [
            ("Acme Copiers", "acme-copiers", True)
        ]

    def test_create_with_routing_keys(self, cli_db):
        result = runner.invoke(
            app,
            [
                "tenants",
                "create",
                "Acme Copiers",
                "--slug",
                "acme",
                "--subdomain-prefix",
                "acmeprint",
                "--path-prefix",
                "ap",
                "--inactive",
            ],
        )

        assert result.exit_code == 0
        (tenant,) = cli_db(select(Tenant))
        assert tenant.subdomain_prefix == "acmeprint"
        assert tenant.path_prefix == "ap"
        assert tenant.is_active is False

    def test_create_duplicate_slug(self, cli_db):
        runner.invoke(app, ["tenants", "create", "Acme", "--slug", "acme"])

        result = runner.invoke(app, ["tenants", "create", "Acme Again", "--slug", "acme"])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert len(cli_db(select(Tenant))) == 1

    def test_create_invalid_slug(self, cli_db):
        result = runner.invoke(app, ["tenants", "create", "Acme", "--slug", "Bad Slug"])

        assert result.exit_code == 1
        assert "Error" in result.output
        assert cli_db(select(Tenant)) == []

    def test_list_empty(self, cli_db):
        result = runner.invoke(app, ["tenants", "list"])

        assert result.exit_code == 0
        assert "No tenants yet." in result.output

    def test_list(self, cli_db):
        runner.invoke(app, ["tenants", "create", "Acme", "--slug", "acme"])
        runner.invoke(app, ["tenants", "create", "Globex", "--slug", "globex"])

        result = runner.invoke(app, ["tenants", "list"])

        assert result.exit_code == 0
        assert "acme" in result.output
        assert "globex" in result.output

    def test_deactivate(self, cli_db):
        runner.invoke(app, ["tenants", "create", "Acme", "--slug", "acme"])

        result = runner.invoke(app, ["tenants", "deactivate", "acme"])

        assert result.exit_code == 0
        (tenant,) = cli_db(select(Tenant))
        assert tenant.is_active is False

    def test_deactivate_unknown(self, cli_db):
        result = runner.invoke(app, ["tenants", "deactivate", "nobody"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_urls(self, cli_db):
        runner.invoke(app, ["tenants", "create", "Acme", "--slug", "acme"])

        result = runner.invoke(app, ["tenants", "urls", "acme"])

        assert result.exit_code == 0
        assert "subdomain: https://acme.app.example" in result.output
        assert "path: https://app.example/acme" in result.output


class TestUsersCommand:
    @pytest.fixture
    def acme(self, cli_db):
        runner.invoke(app, ["tenants", "create", "Acme", "--slug", "acme"])
        return cli_db

    def create_user(self, email: str = "rep@acme-copiers.com", password: str = DEFAULT_PASSWORD):
        return runner.invoke(
            app,
            [
                "users",
                "create",
                "--tenant",
                "acme",
                "--email",
                email,
                "--full-name",
                "Dana Rep",
                "--password",
                password,
            ],
        )

    def test_create(self, acme):
        result = self.create_user()

        assert result.exit_code == 0
        assert "Created user" in result.output
        (user,) = acme(select(User))
        assert user.email == "rep@acme-copiers.com"
        assert user.password_hash != DEFAULT_PASSWORD

    def test_unknown_tenant(self, cli_db):
        result = self.create_user()

        assert result.exit_code == 1
        assert "Tenant 'acme' not found" in result.output

    def test_duplicate_email(self, acme):
        self.create_user()

        result = self.create_user()

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert len(acme(select(User))) == 1

    def test_weak_password(self, acme):
        result = self.create_user(password="alllowercase")

        assert result.exit_code == 1
        assert "Password must contain" in result.output
        assert acme(select(User)) == []
