from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import PostgresDsn

class DatabaseSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='DB_')

    host: str = "localhost"
    port: int = 5432
    database: str = "users"
    username: str = "postgres"
    password: SecretStr = SecretStr("")

    # Full SQLAlchemy URL, takes precedence over the fields above
    dsn: str | None = None

    @property
    def database_url(self) -> PostgresDsn | str:
        if self.dsn:
            return self.dsn
        return PostgresDsn.build(
            scheme="postgresql+asyncpg",
            username=self.username,
            password=self.password.get_secret_value(),
            host=self.host,
            port=self.port,
            path=self.database,
        )
