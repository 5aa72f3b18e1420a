from decouple import config, Csv
from sqlalchemy.engine import URL

class Settings:
    # Database Configuration
    MYSQL_HOST: str = config("MYSQL_HOST", default="localhost")
    MYSQL_PORT: int = config("MYSQL_PORT", default=3306, cast=int)
    MYSQL_USER: str = config("MYSQL_USER", default="root")
    MYSQL_PASSWORD: str = config("MYSQL_PASSWORD", default="")
    MYSQL_DATABASE: str = config("MYSQL_DATABASE", default="catalogo")

    # Overrides the MYSQL_* values when set
    DATABASE_URL: str = config("DATABASE_URL", default="")

    # Connection Pool
    DB_POOL_SIZE: int = config("DB_POOL_SIZE", default=10, cast=int)
    DB_MAX_OVERFLOW: int = config("DB_MAX_OVERFLOW", default=5, cast=int)
    DB_POOL_RECYCLE: int = config("DB_POOL_RECYCLE", default=3600, cast=int)
    DB_ECHO: bool = config("DB_ECHO", default=False, cast=bool)

    # Storage Configuration
    IMAGES_DIR: str = config("IMAGES_DIR", default="imgs")
    MAX_UPLOAD_FILES: int = config("MAX_UPLOAD_FILES", default=10, cast=int)
    MAX_FILE_SIZE: int = config("MAX_FILE_SIZE", default=32000000, cast=int)  # 32MB

    # Server Configuration
    HOST: str = config("HOST", default="0.0.0.0")
    PORT: int = config("PORT", default=3000, cast=int)
    CORS_ORIGINS: list = config("CORS_ORIGINS", default="*", cast=Csv())

    # Logging
    LOG_LEVEL: str = config("LOG_LEVEL", default="INFO")

    @property
    def database_url(self) -> str:
        """SQLAlchemy URL for the catalog database"""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return URL.create(
            "mysql+pymysql",
            username=self.MYSQL_USER,
            password=self.MYSQL_PASSWORD or None,
            host=self.MYSQL_HOST,
            port=self.MYSQL_PORT,
            database=self.MYSQL_DATABASE,
        ).render_as_string(hide_password=False)

settings = Settings()
