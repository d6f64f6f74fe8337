from dishka import AsyncContainer, Provider, Scope, make_async_container
from dishka.integrations.fastapi import FastapiProvider
from pydantic_settings import BaseSettings

from app.deps.auth import AuthServicesProvider
from app.deps.db import DbConnectionProvider
from app.services.providers.password_encoder import BcryptPasswordEncoder
from app.services.providers.protocols.password_encoder import IPasswordEncoder
from app.services.providers.protocols.token_provider import ITokenProvider
from app.services.providers.token_provider import JwtTokenProvider
from app.services.users import UserServicesProvider
from app.settings.app import AppSettings
from app.settings.db import DatabaseSettings


class AppProvider(Provider):
    def register_settings(self, settings: BaseSettings):
        self.provide(lambda: settings, scope=Scope.APP, provides=type(settings))


def create_container(
    settings: AppSettings, db_settings: DatabaseSettings
) -> AsyncContainer:
    provider = AppProvider()
    provider.register_settings(settings)
    provider.register_settings(db_settings)

    provider.provide(BcryptPasswordEncoder, provides=IPasswordEncoder, scope=Scope.APP)
    provider.provide(JwtTokenProvider, provides=ITokenProvider, scope=Scope.APP)

    container = make_async_container(
        provider,
        DbConnectionProvider(),
        AuthServicesProvider(),
        UserServicesProvider(),
        FastapiProvider(),
    )
    return container
