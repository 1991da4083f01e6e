import pytest

from singleton.course import Singleton


@pytest.fixture
def fresh_singleton(monkeypatch):
    """Forget any instance built by earlier tests so first access happens again."""
    monkeypatch.setattr(Singleton, "_instance", None)
    return Singleton
