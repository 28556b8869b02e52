# ezelectronics/data/database.py
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from ezelectronics.exceptions import StorageFailure
from ezelectronics.utils.settings import DATABASE_URL
from ezelectronics.utils.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    pass


def build_engine(url: str):
    # sqlite w pamieci: jedno polaczenie dla wszystkich sesji, inaczej kazda widzi pusta baze
    if url.startswith("sqlite") and (url == "sqlite://" or ":memory:" in url):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


engine = build_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def init_db(bind=None) -> None:
    # modele musza byc zaimportowane zanim create_all zobaczy tabele
    import ezelectronics.data.models  # noqa: F401

    bind = bind or engine
    Base.metadata.create_all(bind=bind)
    logger.info(f"Database tables ready: {sorted(Base.metadata.tables.keys())}")


def get_db() -> Iterator[Session]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session) -> Iterator[Session]:
    """
    Jedna transakcja na operacje: commit na koniec, rollback przy dowolnym bledzie.
    Bledy bazy (SQLAlchemyError) wychodza jako StorageFailure, bledy domenowe bez zmian.
    """
    try:
        yield db
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Transaction rolled back, storage error: {e}")
        raise StorageFailure(str(e)) from e
    except Exception:
        db.rollback()
        raise
