from pydantic_settings import BaseSettings
from typing import List, Literal, Union
import os
import json


class Settings(BaseSettings):
    database_url: str = "sqlite+aiosqlite:///./products.db"
    storage_backend: Literal["sql", "memory"] = "sql"
    log_level: str = "INFO"
    environment: str = "local"
    api_prefix: str = ""
    # CORS origins - can be JSON array or comma-separated string
    cors_origins: Union[List[str], str] = ["*"]
    db_pool_size: int = 10
    db_max_overflow: int = 20
    db_schema: str = "public"

    # GET /products/{id} for an unknown id answers 200 + null unless this is set
    not_found_as_404: bool = False

    request_logging: bool = True

    def get_cors_origins_list(self) -> List[str]:
        """Get CORS origins as a list, accepting JSON or comma-separated input."""
        if isinstance(self.cors_origins, str):
            try:
                origins = json.loads(self.cors_origins)
            except (json.JSONDecodeError, ValueError):
                origins = [o.strip() for o in self.cors_origins.split(",") if o.strip()]
        else:
            origins = self.cors_origins

        return origins if isinstance(origins, list) else [origins]

    class Config:
        env_file = f"config/{os.getenv('ENV', 'local')}.env"
        case_sensitive = False


settings = Settings()
