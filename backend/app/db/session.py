from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from backend.app.core.config import settings

DATABASE_URL = settings.database_url


def build_engine(url: str, *, pool_size: int, pool_timeout: float, echo: bool = False) -> Engine:
    """Pool borné : au plus pool_size connexions, pas de débordement."""
    return create_engine(
        url,
        echo=echo,
        pool_pre_ping=True,
        pool_size=pool_size,
        max_overflow=0,
        pool_timeout=pool_timeout,
    )


engine = build_engine(
    DATABASE_URL,
    pool_size=settings.db_pool_size,
    pool_timeout=settings.db_pool_timeout,
    echo=settings.database_echo,
)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
