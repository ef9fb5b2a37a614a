"""Configuration management for the todo bridge."""

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from todobridge.core.constants import API_BASE_URL, APIConstants, RPCConstants


class Config(BaseSettings):
    """Application configuration."""

    api_key: SecretStr | None = Field(default=None, alias="SC_API_KEY", description="Task API bearer credential")
    api_base_url: str = Field(
        default=API_BASE_URL,
        alias="TODO_BRIDGE_API_BASE_URL",
        description="Base URL of the task API",
    )
    request_timeout: float = Field(
        default=float(APIConstants.REQUEST_TIMEOUT),
        alias="TODO_BRIDGE_REQUEST_TIMEOUT",
        description="Default deadline in seconds for task API calls",
        gt=0,
    )
    require_uuid_ids: bool = Field(
        default=False,
        alias="TODO_BRIDGE_REQUIRE_UUID_IDS",
        description="Reject todo ids that are not UUIDs",
    )

    # RPC server
    host: str = Field(default="127.0.0.1", alias="TODO_BRIDGE_HOST", description="Bind address for the RPC server")
    port: int = Field(default=RPCConstants.DEFAULT_PORT, alias="TODO_BRIDGE_PORT", description="RPC server port")

    # Front-end
    server_url: str = Field(
        default=f"http://127.0.0.1:{RPCConstants.DEFAULT_PORT}",
        alias="TODO_BRIDGE_SERVER_URL",
        description="RPC server the interactive menu connects to",
    )
    rpc_timeout: float = Field(
        default=float(RPCConstants.CALL_TIMEOUT),
        alias="TODO_BRIDGE_RPC_TIMEOUT",
        description="Deadline in seconds attached to each menu call",
        gt=0,
    )

    log_level: str = Field(default="INFO", alias="TODO_BRIDGE_LOG_LEVEL", description="Logging level")

    model_config = SettingsConfigDict(
        case_sensitive=False,
        env_file=".env",
        env_file_encoding="utf-8",
        populate_by_name=True,
    )


def load_config() -> Config:
    """Load configuration from environment and .env file."""
    return Config()
