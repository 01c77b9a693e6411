"""Tests for the Alembic migration tree."""

from pathlib import Path

from alembic.script import ScriptDirectory

import seo_rewriter.db

MIGRATIONS_DIR = Path(seo_rewriter.db.__file__).parent / "migrations"


class TestMigrations:
    """Migration scripts shipped with the package."""

    def test_env_and_template_present(self) -> None:
        assert (MIGRATIONS_DIR / "env.py").is_file()
        assert (MIGRATIONS_DIR / "script.py.mako").is_file()

    def test_single_initial_head(self) -> None:
        script = ScriptDirectory(str(MIGRATIONS_DIR))

        assert script.get_heads() == ["20261019_001"]
        revision = script.get_revision("20261019_001")
        assert revision.down_revision is None
