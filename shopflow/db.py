from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, declarative_base

from .core.config import settings

# Base para modelos (lo importa shopflow.main)
Base = declarative_base()

SQLALCHEMY_DATABASE_URL = settings.database_url

# Engine con timeout alto (contención ligera)
engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False, "timeout": 60},
    pool_pre_ping=True,
)


# PRAGMAs por conexión
@event.listens_for(engine, "connect")
def _on_connect(dbapi_conn, _):
    cur = dbapi_conn.cursor()
    try:
        cur.execute("PRAGMA journal_mode=WAL;")
        cur.execute("PRAGMA busy_timeout=60000;")
        cur.execute("PRAGMA foreign_keys=ON;")
    finally:
        cur.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """Crea las tablas faltantes. Los modelos deben estar importados antes."""
    from .models import ledger as _ledger_models  # noqa: F401
    from .models import product as _product_models  # noqa: F401
    from .models import sale as _sale_models  # noqa: F401

    Base.metadata.create_all(bind=engine)


# Dependencia FastAPI
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def row_to_dict(row):
    if row is None:
        return None
    if hasattr(row, "_mapping"):
        return dict(row._mapping)
    return dict(row)


@contextmanager
def atomic(db):
    """Una operación = una transacción: commit al final o rollback completo."""
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
