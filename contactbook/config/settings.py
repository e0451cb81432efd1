"""Application settings for the contact store.

Environment variables are loaded from a ``.env`` file using ``python-dotenv``
and exposed through a Pydantic settings object. The store path is resolved once,
against a fixed base directory, when this module is imported.
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

from contactbook.domain.value_objects.ids import IdStrategyName
from contactbook.repositories.json_file.contacts_json import JSON_INDENT

# Load environment variables from a .env file if present
load_dotenv()

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------
DEFAULT_STORE_PATH = Path("db") / "contacts.json"
DEFAULT_ID_STRATEGY = IdStrategyName.SEQUENTIAL


class Settings(BaseModel):
    """Immutable settings object used across the application."""

    base_dir: Path
    store_path: Path
    id_strategy: IdStrategyName = DEFAULT_ID_STRATEGY
    indent: int = JSON_INDENT

    model_config = ConfigDict(frozen=True)


def _build_settings() -> Settings:
    """Construct the ``Settings`` instance based on environment variables."""

    base_dir = Path(os.getenv("CONTACTBOOK_BASE_DIR") or Path.cwd()).resolve()

    raw_path = Path(os.getenv("CONTACTBOOK_STORE_PATH") or DEFAULT_STORE_PATH)
    store_path = raw_path if raw_path.is_absolute() else base_dir / raw_path

    raw_strategy = os.getenv("CONTACTBOOK_ID_STRATEGY", DEFAULT_ID_STRATEGY.value).strip().lower()
    try:
        id_strategy = IdStrategyName(raw_strategy)
    except ValueError:
        allowed = ", ".join(s.value for s in IdStrategyName)
        raise RuntimeError(
            f"CONTACTBOOK_ID_STRATEGY must be one of: {allowed} (got {raw_strategy!r})"
        ) from None

    return Settings(base_dir=base_dir, store_path=store_path, id_strategy=id_strategy)


# Public settings instance
settings = _build_settings()

# Convenient exports
STORE_PATH = settings.store_path
