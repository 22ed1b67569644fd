from functools import lru_cache

from pydantic_settings import BaseSettings

from app.domain.schema_definition import DATA_ENTITY


class Settings(BaseSettings):
    # Supabase (document store + settings store)
    supabase_url: str = ""
    supabase_secret_key: str = ""

    # Application identity
    app_id: str = "checkout-customizer"
    app_version: str = "0.0.0"

    # Storefront account, used to build the workspaces URL
    account: str = ""

    # Document collection holding the customizations
    data_entity: str = DATA_ENTITY

    # Outbound gateway (workspace listing)
    workspaces_url: str = "http://platform.io.vtex.com/{account}/"
    gateway_timeout: float = 30.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


def get_workspaces_url() -> str:
    """
    Get the workspace listing URL for the configured account.

    Returns:
        The URL with the ``{account}`` placeholder filled in
    """
    return settings.workspaces_url.format(account=settings.account)
