from decouple import config

class ClientSettings:
    API_URL: str = config("CATALOG_API_URL", default="http://localhost:8000/api")
    APP_NAME: str = config("CATALOG_APP_NAME", default="Storefront")
    TIMEOUT: float = config("CATALOG_API_TIMEOUT", default=10.0, cast=float)

client_settings = ClientSettings()
