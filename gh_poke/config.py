"""Configuration loading for gh-poke."""

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .exceptions import ConfigError

PROJECT_NAME = "poke"


def default_env_file() -> Path:
    """Location of the user's dotenv file."""
    return Path.home() / ".config" / PROJECT_NAME / ".env"


def default_state_path() -> Path:
    """Location of the persisted to-do list."""
    return Path.home() / f".{PROJECT_NAME}" / "todo.json"


def parse_list(value: str | None) -> list[str]:
    """Split a comma-separated setting, dropping quotes and empty entries.

    Example:
        >>> parse_list('"acme, widgets"')
        ['acme', 'widgets']
    """
    if not value:
        return []
    cleaned = value.replace('"', "").replace("'", "")
    return [part.strip() for part in cleaned.split(",") if part.strip()]


class PokeConfig(BaseModel):
    """Settings resolved once at startup and passed to every component."""

    github_token: str = Field(..., description="GitHub personal access token")
    work_orgs: list[str] = Field(
        default_factory=list,
        description="Organizations whose items get a priority boost; first is default",
    )
    work_teams: list[str] = Field(
        default_factory=list, description="Team slugs whose review requests are shown"
    )
    state_path: Path = Field(
        default_factory=default_state_path, description="Path of the to-do JSON file"
    )
    notification_limit: int = Field(
        10, ge=0, description="Items shown in the desktop notification"
    )
    listing_limit: int | None = Field(
        None, ge=0, description="Items shown per section in the full listing"
    )
    recent_limit: int = Field(
        5, ge=0, description="Items shown for the done and reviewed sections"
    )

    @property
    def default_organization(self) -> str | None:
        return self.work_orgs[0] if self.work_orgs else None


def load_config(env_file: Path | None = None, **overrides: object) -> PokeConfig:
    """Build the configuration from the environment and the dotenv file.

    Variables already present in the environment take precedence over the
    dotenv file.

    Args:
        env_file: Dotenv file to read; defaults to ``~/.config/poke/.env``
        **overrides: Explicit values that win over anything read

    Returns:
        PokeConfig instance

    Raises:
        ConfigError: If no GitHub token can be found
    """
    path = env_file or default_env_file()
    if path.exists():
        load_dotenv(path, override=False)

    token = (os.getenv("GITHUB_TOKEN") or "").replace('"', "").strip()
    if not token:
        raise ConfigError(
            "GitHub token required. Create ~/.config/poke/.env with "
            "GITHUB_TOKEN=your_token"
        )

    values: dict[str, object] = {
        "github_token": token,
        "work_orgs": parse_list(os.getenv("WORK_ORGS")),
        "work_teams": parse_list(os.getenv("WORK_TEAMS")),
    }
    state_file = os.getenv("POKE_STATE_FILE")
    if state_file:
        values["state_path"] = Path(state_file).expanduser()

    values.update({k: v for k, v in overrides.items() if v is not None})
    return PokeConfig.model_validate(values)
