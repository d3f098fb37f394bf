"""Application configuration using pydantic-settings."""

import functools
from pathlib import Path
from typing import Any

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource, SettingsConfigDict

from pte_practice.models.practice import PracticeBank


def _find_project_root() -> Path:
    """Find project root by locating pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent
    return Path(__file__).resolve().parent.parent.parent


class YamlSettingsSource(PydanticBaseSettingsSource):
    """Custom settings source that loads from settings.yaml."""

    def get_field_value(self, field_name: str) -> tuple[Any, str, bool]:
        """Not used - we implement __call__ instead."""
        return None, "", False

    def __call__(self) -> dict[str, Any]:
        """Load settings from YAML file."""
        yaml_path = _find_project_root() / "config" / "settings.yaml"
        if not yaml_path.exists():
            return {}

        with open(yaml_path, encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}

        # Flatten nested structure to match Settings field names
        flattened = {}
        if 'server' in data:
            flattened['host'] = data['server'].get('host')
            flattened['port'] = data['server'].get('port')
            flattened['allowed_origins'] = data['server'].get('allowed_origins')
        if 'scoring' in data:
            flattened['default_duration_seconds'] = (
                data['scoring'].get('default_duration_seconds')
            )
        if 'history' in data:
            flattened['history_limit'] = data['history'].get('limit')
            flattened['history_filename'] = data['history'].get('filename')

        return {k: v for k, v in flattened.items() if v is not None}


class Settings(BaseSettings):
    """Application settings loaded from environment and config files."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    allowed_origins: list[str] = Field(
        default_factory=lambda: ["http://localhost:8000", "http://127.0.0.1:8000"]
    )

    # Scoring
    default_duration_seconds: float = Field(default=1.0, gt=0)

    # History
    history_limit: int = Field(default=100, ge=1)
    history_filename: str = Field(default="practice_history.json")

    # Paths
    project_root: Path = Field(default_factory=_find_project_root)

    @property
    def history_dir(self) -> Path:
        d = self.project_root / "data" / "history"
        d.mkdir(parents=True, exist_ok=True)
        return d

    @property
    def practice_bank_path(self) -> Path:
        return self.project_root / "config" / "practice_bank.yaml"

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Customise settings sources to include YAML file.

        Priority order (highest to lowest):
        1. init_settings (arguments passed to Settings())
        2. env_settings (environment variables)
        3. dotenv_settings (.env file)
        4. YamlSettingsSource (settings.yaml)
        5. file_secret_settings
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            YamlSettingsSource(settings_cls),
            file_secret_settings,
        )


@functools.lru_cache
def get_settings() -> Settings:
    """Get application settings singleton."""
    return Settings()


def load_practice_bank(path: Path | None = None) -> PracticeBank:
    """Load read-aloud, repeat-sentence and listening content from YAML."""
    bank_path = path or _find_project_root() / "config" / "practice_bank.yaml"
    if not bank_path.exists():
        raise FileNotFoundError(f"Practice bank not found: {bank_path}")
    with open(bank_path, encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    return PracticeBank(**data.get('practice', {}))
