"""Relay configuration and env handling."""
from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

OPENAI_RESPONSES_URL = "https://api.openai.com/v1/responses"
DEFAULT_MODEL = "gpt-4.1"
DEFAULT_PERSONA = "act as a poet and answer in rhyme all the times"
DEFAULT_PROMPT = "Say something about love!"


class BaseAppSettings(BaseSettings):
    """Base settings with common env config."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@dataclass(frozen=True)
class RelayConfig:
    """Everything the relay needs to talk to the upstream, passed in explicitly."""

    api_key: str
    organization: str = ""
    upstream_url: str = OPENAI_RESPONSES_URL
    model: str = DEFAULT_MODEL
    persona: str = DEFAULT_PERSONA
    default_prompt: str = DEFAULT_PROMPT


class RelaySettings(BaseAppSettings):
    model_config = SettingsConfigDict(env_prefix="RELAY_")

    host: str = "0.0.0.0"
    port: int = 8080
    json_logs: bool = True

    openai_api_key: str = Field("", validation_alias="OPENAI_API_KEY")
    openai_org_id: str = Field("", validation_alias="OPENAI_ORG_ID")

    upstream_url: str = OPENAI_RESPONSES_URL
    upstream_timeout_seconds: float | None = None
    model: str = DEFAULT_MODEL
    persona: str = DEFAULT_PERSONA
    default_prompt: str = DEFAULT_PROMPT

    def relay_config(self) -> RelayConfig:
        return RelayConfig(
            api_key=self.openai_api_key,
            organization=self.openai_org_id,
            upstream_url=self.upstream_url,
            model=self.model,
            persona=self.persona,
            default_prompt=self.default_prompt,
        )
