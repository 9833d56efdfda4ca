"""Configuration loader for extraction-api."""

import os
from dataclasses import dataclass, field
from pathlib import Path

import yaml
from dotenv import load_dotenv

load_dotenv()

CONFIG_DIR = Path(__file__).resolve().parent / "configs"
CONFIG_ENV_VAR = "CONTENT_EXTRACTION_CONFIG"


@dataclass
class ModelConfig:
    name: str = "gpt-4o-mini"
    max_tokens: int = 1000
    temperature: float = 0.3
    max_content_chars: int = 4000
    fallback_summary_chars: int = 200


@dataclass
class StoreConfig:
    table: str = "raw_articles"
    include_extracted_fields: bool = False


@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 3000


@dataclass
class AppConfig:
    # Secrets come from the environment only
    supabase_url: str | None = None
    supabase_service_role_key: str | None = None
    openai_api_key: str | None = None
    extraction_api_key: str | None = None
    model: ModelConfig = field(default_factory=ModelConfig)
    store: StoreConfig = field(default_factory=StoreConfig)
    server: ServerConfig = field(default_factory=ServerConfig)

    @property
    def has_store(self) -> bool:
        return bool(self.supabase_url and self.supabase_service_role_key)

    @property
    def has_model(self) -> bool:
        return bool(self.openai_api_key)

    def presence(self) -> dict[str, bool]:
        """Report which external settings are configured, without their values."""
        return {
            "store": bool(self.supabase_url),
            "model": bool(self.openai_api_key),
            "apiKey": bool(self.extraction_api_key),
        }


def load_config(config_name: str | None = None) -> AppConfig:
    """Load configuration from YAML file plus environment secrets.

    Args:
        config_name: Name of config file (without .yaml extension).
                    If None, uses CONTENT_EXTRACTION_CONFIG env var or "prod".

    Returns:
        AppConfig instance
    """
    if config_name is None:
        config_name = os.environ.get(CONFIG_ENV_VAR, "prod")

    config_path = CONFIG_DIR / f"{config_name}.yaml"
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    return _parse_config(raw)


def _parse_config(data: dict) -> AppConfig:
    """Parse config dictionary and environment into AppConfig."""
    model_raw = data.get("model", {})
    model = ModelConfig(
        name=model_raw.get("name", "gpt-4o-mini"),
        max_tokens=model_raw.get("max_tokens", 1000),
        temperature=model_raw.get("temperature", 0.3),
        max_content_chars=model_raw.get("max_content_chars", 4000),
        fallback_summary_chars=model_raw.get("fallback_summary_chars", 200),
    )

    store_raw = data.get("store", {})
    store = StoreConfig(
        table=store_raw.get("table", "raw_articles"),
        include_extracted_fields=store_raw.get("include_extracted_fields", False),
    )

    server_raw = data.get("server", {})
    server = ServerConfig(
        host=server_raw.get("host", "0.0.0.0"),
        port=int(os.getenv("PORT") or server_raw.get("port", 3000)),
    )

    return AppConfig(
        supabase_url=os.getenv("SUPABASE_URL") or None,
        supabase_service_role_key=os.getenv("SUPABASE_SERVICE_ROLE_KEY") or None,
        openai_api_key=os.getenv("OPENAI_API_KEY") or None,
        extraction_api_key=os.getenv("EXTRACTION_API_KEY") or None,
        model=model,
        store=store,
        server=server,
    )


# Global config instance (lazy loaded)
_config: AppConfig | None = None


def get_config() -> AppConfig:
    """Get the global config instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def set_config(config: AppConfig) -> None:
    """Set the global config instance (for testing)."""
    global _config
    _config = config


def reset_config() -> None:
    """Reset the global config, forcing reload on next access."""
    global _config
    _config = None
