# This file defines the deployment configuration and its environment loader.
# Values come from DEPLOY_* variables (optionally via `.env`) and can be overridden from the CLI.

from __future__ import annotations

import os
from datetime import datetime
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator


def default_log_file() -> str:
    return f"deploy_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"


class DeployConfig(BaseModel):
    """Typed deployment configuration."""

    model_config = ConfigDict(extra="ignore")

    git_repo: str = ""
    personal_access_token: SecretStr = SecretStr("")
    branch_name: str = "main"
    remote_user: str = "user"
    remote_host: str = "remote.server.com"
    ssh_key: Path = Field(default_factory=lambda: Path.home() / ".ssh" / "id_rsa")
    app_port: int = 8080
    app_name: str = "myapp"
    remote_app_dir: str = "~/app_repo"
    local_checkout_dir: Path = Path("app_repo")
    docker_network: str = "app_network"
    log_file: str = Field(default_factory=default_log_file)
    container_port: int = 80
    health_path: str = "/health"
    http_timeout_seconds: float = 10.0
    cleanup: bool = False

    @field_validator("git_repo")
    @classmethod
    def strip_scheme(cls, value: str) -> str:
        # Stored without a scheme; clone_url() adds it.
        value = value.strip()
        for prefix in ("https://", "http://"):
            if value.startswith(prefix):
                return value[len(prefix) :]
        return value

    @field_validator("app_port", "container_port")
    @classmethod
    def validate_port(cls, value: int) -> int:
        if not 0 < value < 65536:
            raise ValueError("Port must be between 1 and 65535.")
        return value

    @field_validator("app_name", "docker_network")
    @classmethod
    def validate_docker_name(cls, value: str) -> str:
        if not value or not value.replace("-", "").replace("_", "").replace(".", "").isalnum():
            raise ValueError(f"Invalid docker resource name: {value!r}")
        return value

    @field_validator("health_path")
    @classmethod
    def validate_health_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("health_path must start with '/'.")
        return value

    @property
    def remote_target(self) -> str:
        return f"{self.remote_user}@{self.remote_host}"

    def clone_url(self) -> str:
        token = self.personal_access_token.get_secret_value()
        if token:
            return f"https://{token}@{self.git_repo}"
        return f"https://{self.git_repo}"

    def secrets(self) -> tuple[str, ...]:
        token = self.personal_access_token.get_secret_value()
        return (token,) if token else ()


_ENV_FIELDS: dict[str, str] = {
    "git_repo": "DEPLOY_GIT_REPO",
    "personal_access_token": "DEPLOY_PERSONAL_ACCESS_TOKEN",
    "branch_name": "DEPLOY_BRANCH",
    "remote_user": "DEPLOY_REMOTE_USER",
    "remote_host": "DEPLOY_REMOTE_HOST",
    "ssh_key": "DEPLOY_SSH_KEY",
    "app_port": "DEPLOY_APP_PORT",
    "app_name": "DEPLOY_APP_NAME",
    "remote_app_dir": "DEPLOY_REMOTE_APP_DIR",
    "local_checkout_dir": "DEPLOY_LOCAL_CHECKOUT_DIR",
    "docker_network": "DEPLOY_DOCKER_NETWORK",
    "log_file": "DEPLOY_LOG_FILE",
    "container_port": "DEPLOY_CONTAINER_PORT",
    "health_path": "DEPLOY_HEALTH_PATH",
    "http_timeout_seconds": "DEPLOY_HTTP_TIMEOUT_SECONDS",
}


def load_deploy_config(
    overrides: dict[str, Any] | None = None, *, load_env: bool = True
) -> DeployConfig:
    """Build config from the environment, then apply non-None `overrides`."""

    if load_env:
        load_dotenv()

    values: dict[str, Any] = {}
    for field_name, env_name in _ENV_FIELDS.items():
        raw = os.getenv(env_name)
        if raw is not None and raw.strip() != "":
            values[field_name] = raw.strip()

    if "ssh_key" in values:
        values["ssh_key"] = Path(values["ssh_key"]).expanduser()

    for key, value in (overrides or {}).items():
        if value is not None:
            values[key] = value

    return DeployConfig.model_validate(values)
