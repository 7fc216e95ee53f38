from pydantic import Field
from pydantic_settings import BaseSettings


# Solar radius; no orbit can sit inside the Sun.
SOLAR_RADIUS_KM = 695_700.0


class Settings(BaseSettings):
    """Application settings loaded from the environment and .env"""

    # API
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    api_reload: bool = Field(default=False)
    debug: bool = Field(default=False)

    # Database
    database_url: str = Field(default="sqlite:///./planets.db")
    seed_solar_system: bool = Field(default=True)

    # Logging
    log_level: str = Field(default="info")

    # CORS
    cors_origins: list[str] = Field(default=["*"])
    cors_allow_credentials: bool = Field(default=True)
    cors_allow_methods: list[str] = Field(default=["*"])
    cors_allow_headers: list[str] = Field(default=["*"])

    # Sessions (the admin flag lives in the signed session cookie)
    session_secret_key: str = Field(default="change-me")
    members_url: str = Field(default="/members")

    # Planet validation bounds, exclusive on both ends
    min_distance_from_sun_km: float = Field(default=SOLAR_RADIUS_KM, ge=0)
    max_distance_from_sun_km: float = Field(default=1e12, gt=0)

    # Docs
    enable_docs: bool = Field(default=True)
    enable_redoc: bool = Field(default=True)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        """Development mode is on when debugging or auto-reloading"""
        return self.debug or self.api_reload

    @property
    def is_production(self) -> bool:
        return not self.is_development

    def get_cors_config(self) -> dict:
        """Keyword arguments for CORSMiddleware"""
        return {
            "allow_origins": self.cors_origins,
            "allow_credentials": self.cors_allow_credentials,
            "allow_methods": self.cors_allow_methods,
            "allow_headers": self.cors_allow_headers,
        }


settings = Settings()


def get_settings() -> Settings:
    """Dependency returning the global settings"""
    return settings
