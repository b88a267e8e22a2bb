"""Settings file handling for TraderPlan.

Settings live in ``~/.config/traderplan/config.toml`` unless the
``TRADERPLAN_HOME`` environment variable points somewhere else. A missing
or unreadable file means defaults are used.
"""

import logging
import os
from pathlib import Path
from typing import Optional

import toml
from pydantic import ValidationError

from traderplan.models import DEFAULT_PLAN, PlanConfiguration

logger = logging.getLogger(__name__)

DEFAULT_CURRENCY = "R$"


def get_config_dir() -> Path:
    """Get the directory holding the settings file and database."""
    override = os.environ.get("TRADERPLAN_HOME")
    if override:
        return Path(override)
    return Path.home() / ".config" / "traderplan"


def get_config_path() -> Path:
    """Get the settings file path."""
    return get_config_dir() / "config.toml"


def load_settings() -> Optional[dict]:
    """Load the settings file.
    
    Returns:
        Settings dict or None if not configured.
    """
    config_path = get_config_path()
    
    if not config_path.exists():
        return None
    
    try:
        return toml.load(config_path)
    except (OSError, toml.TomlDecodeError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", config_path, e)
        return None


def get_db_path(settings: Optional[dict] = None) -> Path:
    """Get the database path from settings, defaulting next to the settings file."""
    db_path = (settings or {}).get("storage", {}).get("db_path")
    if db_path:
        return Path(db_path).expanduser()
    return get_config_dir() / "traderplan.db"


def get_currency(settings: Optional[dict] = None) -> str:
    """Get the currency symbol used for display."""
    return (settings or {}).get("display", {}).get("currency", DEFAULT_CURRENCY)


def plan_from_settings(settings: Optional[dict] = None) -> PlanConfiguration:
    """Build the default plan from the ``[plan]`` section.
    
    Missing keys fall back to the built-in defaults; an invalid section is
    ignored with a warning.
    """
    plan = (settings or {}).get("plan")
    if not plan:
        return DEFAULT_PLAN
    
    try:
        return PlanConfiguration.model_validate(
            {**DEFAULT_PLAN.model_dump(), **plan}
        )
    except ValidationError as e:
        logger.warning("Ignoring invalid [plan] settings: %s", e)
        return DEFAULT_PLAN


def create_template_settings() -> Path:
    """Create a template settings file.
    
    Returns:
        Path of the written file.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    
    template = {
        "plan": DEFAULT_PLAN.model_dump(),
        "storage": {
            "db_path": str(get_config_dir() / "traderplan.db"),
        },
        "display": {
            "currency": DEFAULT_CURRENCY,
        },
    }
    
    with open(config_path, "w") as f:
        toml.dump(template, f)
    
    return config_path
