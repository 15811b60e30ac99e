from pydantic import BaseModel
import os
from dotenv import load_dotenv
load_dotenv()  # carga el archivo .env de la raíz

class Settings(BaseModel):
    app_name: str = os.getenv("APP_NAME", "PetClinic Customers")
    env: str = os.getenv("APP_ENV", "dev")
    mongodb_uri: str = os.getenv("MONGODB_URI", "mongodb://localhost:27017")
    db_name: str = os.getenv("DB_NAME", "petclinic")
    frontend_base_url: str = os.getenv("FRONTEND_BASE_URL", "http://localhost:8080")
    log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()
    rate_limit_writes: str = os.getenv("RATE_LIMIT_WRITES", "30/minute")


_settings: Settings | None = None
def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
