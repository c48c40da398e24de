"""
Configuration module

Related classes:
  - server.app.create_app: uses ServerConfig (CORS) and TodoConfig
  - todo_client.client.TodoClient: uses ClientConfig
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "app_config.yaml"


def _as_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class ServerConfig:
    """HTTP server settings"""

    host: str = "0.0.0.0"
    port: int = 3001
    reload: bool = False
    cors_origins: List[str] = None  # type: ignore

    def __post_init__(self):
        if self.cors_origins is None:
            self.cors_origins = ["*"]


@dataclass
class ClientConfig:
    """Settings for the HTTP client used by the view"""

    api_url: str = "http://localhost:3001"
    timeout: float = 5.0


@dataclass
class TodoConfig:
    """Store behaviour"""

    # Apply create-time title validation to updates too
    strict_titles: bool = False


@dataclass
class Config:
    """Application configuration"""

    server: ServerConfig = None  # type: ignore
    client: ClientConfig = None  # type: ignore
    todo: TodoConfig = None  # type: ignore

    log_level: str = "INFO"
    log_file: str = "logs/todo_app.log"

    def __post_init__(self):
        """Fill in nested defaults"""
        if self.server is None:
            self.server = ServerConfig()
        if self.client is None:
            self.client = ClientConfig()
        if self.todo is None:
            self.todo = TodoConfig()

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "Config":
        """Load settings from a YAML file.

        Args:
            config_path: path to the file (defaults to config/app_config.yaml)

        Returns:
            Config: defaults when the file does not exist
        """
        if config_path is None:
            config_path = DEFAULT_CONFIG_PATH
        config_path = Path(config_path)
        if not config_path.exists():
            return cls()

        with open(config_path, "r", encoding="utf-8") as f:
            yaml_data: Dict[str, Any] = yaml.safe_load(f) or {}

        server_data = yaml_data.get("server", {})
        client_data = yaml_data.get("client", {})
        todo_data = yaml_data.get("todo", {})
        log_data = yaml_data.get("log", {})

        return cls(
            server=ServerConfig(
                host=server_data.get("host", "0.0.0.0"),
                port=int(server_data.get("port", 3001)),
                reload=_as_bool(server_data.get("reload", False)),
                cors_origins=list(server_data.get("cors_origins", ["*"])),
            ),
            client=ClientConfig(
                api_url=client_data.get("api_url", "http://localhost:3001"),
                timeout=float(client_data.get("timeout", 5.0)),
            ),
            todo=TodoConfig(
                strict_titles=_as_bool(todo_data.get("strict_titles", False)),
            ),
            log_level=log_data.get("level", "INFO"),
            log_file=log_data.get("file", "logs/todo_app.log"),
        )

    @classmethod
    def from_env(cls, base: Optional["Config"] = None) -> "Config":
        """Apply environment overrides on top of ``base`` (or defaults)."""
        config = base or cls()
        config.server.host = os.getenv("HOST", config.server.host)
        config.server.port = int(os.getenv("PORT", str(config.server.port)))
        config.client.api_url = os.getenv("TODO_API_URL", config.client.api_url)
        if "TODO_STRICT_TITLES" in os.environ:
            config.todo.strict_titles = _as_bool(os.environ["TODO_STRICT_TITLES"])
        config.log_level = os.getenv("LOG_LEVEL", config.log_level)
        config.log_file = os.getenv("LOG_FILE", config.log_file)
        return config


def load_config(config_path: Optional[Path] = None) -> Config:
    """YAML settings with environment overrides applied."""
    return Config.from_env(Config.from_yaml(config_path))
