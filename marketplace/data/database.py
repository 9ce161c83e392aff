# marketplace/data/database.py
from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from marketplace.utils.settings import DATABASE_URL


class Base(DeclarativeBase):
    pass


def make_engine(url: str = DATABASE_URL, **kwargs):
    # sqlite: sesje ida przez pule watkow uvicorna
    if url.startswith("sqlite"):
        kwargs.setdefault("connect_args", {"check_same_thread": False})
    return create_engine(url, **kwargs)


engine = make_engine()
SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None, session_factory=None) -> None:
    """Tworzy tabele i seeduje konto admina (tylko jesli go nie ma)."""
    from marketplace.data import models  # noqa: F401  rejestracja modeli w Base.metadata
    from marketplace.data.seed import seed_admin

    bind = bind or engine
    Base.metadata.create_all(bind=bind)

    db = (session_factory or SessionLocal)()
    try:
        seed_admin(db)
    finally:
        db.close()
