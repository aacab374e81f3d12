from __future__ import annotations

from sqlalchemy import create_engine

import reviewgate.database.db as db_module


def test_unreachable_database_reports_failure_without_rebinding(monkeypatch, tmp_path):
    broken_url = f"sqlite:///{tmp_path / 'missing' / 'reviews.db'}"
    broken = create_engine(broken_url)
    monkeypatch.setattr(db_module, "engine", broken)
    monkeypatch.setattr(db_module, "DATABASE_URL", broken_url)

    assert db_module.verify_database_connection() is False
    assert db_module.get_engine() is broken
    assert db_module.get_active_database_url() == broken_url
    assert not (tmp_path / "missing").exists()


def test_reachable_database_passes_check(monkeypatch, tmp_path):
    url = f"sqlite:///{tmp_path / 'reviews.db'}"
    monkeypatch.setattr(db_module, "engine", create_engine(url))

    assert db_module.verify_database_connection() is True
