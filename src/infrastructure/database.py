from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from infrastructure.config import DATABASE_URL, SQL_ECHO

def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # sessions are opened on the request threads, not the creating one
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True, "pool_recycle": 1800}

engine = create_engine(DATABASE_URL, echo=SQL_ECHO, **_engine_options(DATABASE_URL))

SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False)
Base = declarative_base()

def get_db():
    """Request scoped session, closed once the response is sent."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
