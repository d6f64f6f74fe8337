from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix='app_')

    app_name: str = "User Management API"
    log_level: str = "INFO"

    jwt_secret: SecretStr
    jwt_expire_minutes: int = 60 * 24
    bcrypt_rounds: int = 12

    token_cookie_name: str = "token"
    cookie_secure: bool = False

    create_schema: bool = False
