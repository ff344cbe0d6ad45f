from decouple import config, Csv

class Settings:
    # Application
    APP_NAME: str = config("APP_NAME", default="Catalog API")
    APP_VERSION: str = config("APP_VERSION", default="1.0.0")

    # Database Configuration
    DATABASE_URL: str = config("DATABASE_URL", default="sqlite:///./catalog.db")
    DATABASE_ECHO: bool = config("DATABASE_ECHO", default=False, cast=bool)
    CREATE_TABLES_ON_STARTUP: bool = config("CREATE_TABLES_ON_STARTUP", default=True, cast=bool)

    # Server Configuration
    HOST: str = config("HOST", default="0.0.0.0")
    PORT: int = config("PORT", default=8000, cast=int)

    # CORS Configuration
    CORS_ORIGINS: list = config("CORS_ORIGIN", default="http://localhost:5173", cast=Csv())

    # Catalog defaults
    DEFAULT_PRODUCT_IMAGE: str = config(
        "DEFAULT_PRODUCT_IMAGE", default="https://via.placeholder.com/300"
    )

    # Environment
    ENVIRONMENT: str = config("ENVIRONMENT", default="development")
    DEBUG: bool = config("DEBUG", default=True, cast=bool)

    # Logging
    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")

settings = Settings()
