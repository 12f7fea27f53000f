from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI

from .core.config import settings
from .db import SessionLocal, init_db
from .loggers import setup_loggers
from .middleware.errors import install_error_envelope
from .routers import admin, health, products, sales, stock_arrivals, withdrawals
from .seed_demo import seed_products

setup_loggers()
log = logging.getLogger("shopflow")

# Crea tablas faltantes
init_db()


@asynccontextmanager
async def lifespan(_app: FastAPI):
    if settings.seed_demo:
        db = SessionLocal()
        try:
            seed_products(db)
        finally:
            db.close()
    log.info("%s running (%s) db=%s", settings.app_name, settings.app_env, settings.database_url)
    yield


app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)

install_error_envelope(app)
app.include_router(health.router)
app.include_router(products.router)
app.include_router(sales.router)
app.include_router(withdrawals.router)
app.include_router(stock_arrivals.router)
app.include_router(admin.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("shopflow.main:app", host=settings.host, port=settings.port)
