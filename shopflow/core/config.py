import os

from pydantic import Field
from pydantic_settings import BaseSettings

# Raíz del proyecto (donde vive grocery.db por defecto)
BASE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir, os.pardir))
DEFAULT_DB_URL = "sqlite:///" + os.path.join(BASE_DIR, "grocery.db").replace("\\", "/")


class Settings(BaseSettings):
    app_name: str = Field(default="ShopFlow", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    database_url: str = Field(default=DEFAULT_DB_URL, alias="DATABASE_URL")
    seed_demo: bool = Field(default=True, alias="SEED_DEMO")
    default_min_stock: float = Field(default=5.0, alias="DEFAULT_MIN_STOCK")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_dir: str = Field(default="", alias="LOG_DIR")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    class Config:
        env_file = ".env"


settings = Settings()
