from __future__ import annotations

from collections.abc import Generator

import pytest
from sqlalchemy import StaticPool
from sqlalchemy.engine import Engine
from sqlmodel import Session, SQLModel, create_engine

from src.catalog.core.services.catalog_store import CatalogStore
from src.catalog.core.services.database.db_session import configure_sqlite_engine
from src.catalog.runtime.seed import SeedIds, seed_catalog

__all__ = ["engine", "session", "store", "seeded", "seeded_store"]


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    """In-memory SQLite engine with every catalog table created."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    configure_sqlite_engine(engine)

    # Import models to register them with the metadata
    import src.catalog.entities  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session, None, None]:
    """Create a fresh database session for testing."""
    with Session(engine) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def store(session: Session) -> CatalogStore:
    return CatalogStore(session)


@pytest.fixture
def seeded(store: CatalogStore) -> SeedIds:
    """Load the sample catalog and return the seeded ids."""
    return seed_catalog(store)


@pytest.fixture
def seeded_store(store: CatalogStore, seeded: SeedIds) -> CatalogStore:
    return store
