from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from fixit.core.config import settings

if settings.USES_MYSQL:
    engine = create_engine(
        settings.SQLALCHEMY_DATABASE_URI,
        pool_pre_ping=True,          # check connections before use
        pool_size=10,
        max_overflow=20,
        pool_recycle=3600,           # recycle before MySQL's 8h idle timeout
        pool_timeout=30,
        echo=False,
    )
else:
    # SQLite and friends: sessions are shared across the server's worker threads
    engine = create_engine(
        settings.SQLALCHEMY_DATABASE_URI,
        connect_args={"check_same_thread": False} if settings.SQLALCHEMY_DATABASE_URI.startswith("sqlite") else {},
        echo=False,
    )

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Yield a database session for one request"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
