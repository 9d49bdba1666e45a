from pydantic_settings import BaseSettings, SettingsConfigDict


class SaudiIdSettings(BaseSettings):
    model_config = SettingsConfigDict(
        # Automatically pick up the named variables from the environment and
        # strip the SAUDI_ID_ prefix
        env_prefix="SAUDI_ID_",
        # Nested models can have individual fields set via SAUDI_ID_OUTER__INNER
        env_nested_delimiter="__",
        # Rename the env vars to lowercase in pydantic
        case_sensitive=False,
        # Settings are read once and never mutated, which also makes them hashable
        frozen=True,
    )
