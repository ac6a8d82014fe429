# src/flowlint/core/config.py
"""
Configuration schema and loading for flowlint.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction.
"""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from flowlint.contracts.enums import RuntimeVariant


class RuntimeSettings(BaseModel):
    """Settings of the target runtime that affect graph legality.

    Only consulted by the entry-node validator: a resume-capable START
    needs somewhere to persist checkpoints.
    """

    model_config = {"frozen": True}

    checkpoint_store: str | None = Field(
        default=None,
        description="Checkpoint store backing resumable runs (e.g. 'memory', 'sqlite', 'postgres')",
    )

    @field_validator("checkpoint_store")
    @classmethod
    def normalize_checkpoint_store(cls, v: str | None) -> str | None:
        """Treat blank store names as not configured."""
        if v is None:
            return None
        stripped = v.strip()
        return stripped or None

    @property
    def has_checkpoint_store(self) -> bool:
        """Whether a checkpoint store is configured."""
        return self.checkpoint_store is not None


class FlowlintSettings(BaseModel):
    """Top-level flowlint configuration.

    Example YAML:
        runtime: autogen
        runtime_settings:
          checkpoint_store: sqlite
    """

    model_config = {"frozen": True}

    runtime: RuntimeVariant = Field(
        default=RuntimeVariant.LANGGRAPH,
        description="Runtime graphs are validated against",
    )
    runtime_settings: RuntimeSettings = Field(
        default_factory=RuntimeSettings,
        description="Settings of the target runtime",
    )


def load_settings(config_path: Path) -> FlowlintSettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (FLOWLINT_*) - highest priority
    2. Config file
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: FLOWLINT_RUNTIME_SETTINGS__CHECKPOINT_STORE for nested keys.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated FlowlintSettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="FLOWLINT",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase keys; Pydantic fields are lowercase.
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}
    if isinstance(raw_config.get("runtime_settings"), dict):
        raw_config["runtime_settings"] = {k.lower(): v for k, v in raw_config["runtime_settings"].items()}

    return FlowlintSettings(**raw_config)
