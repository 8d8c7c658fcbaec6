from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from product_catalog.config import settings
from product_catalog.models.database_models import Base
from product_catalog.utils.logging import get_logger

logger = get_logger(__name__)


def _create_engine(url: str):
    connect_args = {}
    if url.startswith("sqlite"):
        # Requests run on FastAPI's threadpool
        connect_args["check_same_thread"] = False
    return create_engine(url, echo=settings.SQL_ECHO, connect_args=connect_args)


engine = _create_engine(settings.SQLALCHEMY_DATABASE_URI)
sessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None):
    """Create the catalog tables if they do not exist yet."""
    bind = bind or engine
    logger.info("Creating tables on {}", bind.url.render_as_string(hide_password=True))
    Base.metadata.create_all(bind=bind)


def get_db():
    db = sessionLocal()
    try:
        yield db
    finally:
        db.close()
