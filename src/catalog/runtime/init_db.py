"""Database initialization script."""

from src.catalog.core.services.catalog_store import catalog_scope
from src.catalog.core.services.database.db_manage import DbManageService
from src.catalog.core.services.database.db_session import DbSessionService
from src.catalog.runtime.context import get_config
from src.catalog.runtime.log_config import configure_logging
from src.catalog.runtime.seed import seed_catalog


def init_db(db: DbSessionService | None = None, seed: bool | None = None) -> DbSessionService:
    """Create all catalog tables, loading the sample catalog when asked to.

    ``seed`` defaults to ``database.seed_on_init`` from the configuration.
    """
    db = db or DbSessionService()
    DbManageService(db.engine).create_all()

    if seed is None:
        seed = get_config().database.seed_on_init
    if seed:
        with catalog_scope(db) as store:
            seed_catalog(store)
    return db


if __name__ == "__main__":
    configure_logging()
    init_db()
