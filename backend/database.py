from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from sqlalchemy.pool import StaticPool

from config.app_config import load_config


def create_database_engine(url: str):
    """Create an engine; SQLite connections are shared across request threads."""
    if url.startswith('sqlite'):
        kwargs = {'connect_args': {'check_same_thread': False}}
        if ':memory:' in url or url == 'sqlite://':
            # One connection, or every session would see its own empty database
            kwargs['poolclass'] = StaticPool
        return create_engine(url, echo=False, **kwargs)

    return create_engine(
        url,
        echo=False,
        pool_pre_ping=True,  # Verify connections are alive before using
        pool_recycle=3600
    )


engine = create_database_engine(load_config().database_url)

SessionLocal = sessionmaker(bind=engine)
Base = declarative_base()

def get_db():
    """Dependency for FastAPI routes"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
