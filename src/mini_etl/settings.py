"""Runtime settings for the live source and pipeline behaviour."""

import os
from pathlib import Path
from typing import Optional

try:
    import yaml
except ModuleNotFoundError as e:
    raise ModuleNotFoundError(
        "PyYAML is required for settings loading. Run: poetry install"
    ) from e
from pydantic import BaseModel, Field

DEFAULT_SOURCE_URL = "https://randomuser.me/api/"

_ENV_PREFIX = "MINI_ETL_"
_TRUTHY = ("1", "true", "yes", "on")


class Settings(BaseModel):
    """Live endpoint and pipeline options."""

    source_url: str = Field(default=DEFAULT_SOURCE_URL, description="Live user endpoint")
    results: int = Field(default=50, ge=1, le=5000, description="Records requested per run")
    seed: Optional[str] = Field(default=None, description="Random User API seed for repeatable batches")
    timeout: float = Field(default=10.0, gt=0, description="HTTP timeout in seconds")
    reuse_fallback_metrics: bool = Field(
        default=True,
        description="Use bundled metrics verbatim when the loaded batch is empty",
    )

    @classmethod
    def from_env(cls, environ: Optional[dict[str, str]] = None) -> "Settings":
        """Build settings from MINI_ETL_* environment variables; unset keys keep defaults."""
        env = os.environ if environ is None else environ
        data: dict = {}
        for key in ("source_url", "results", "seed", "timeout"):
            value = env.get(_ENV_PREFIX + key.upper())
            if value is not None and value.strip():
                data[key] = value.strip()
        reuse = env.get(_ENV_PREFIX + "REUSE_FALLBACK_METRICS")
        if reuse is not None and reuse.strip():
            data["reuse_fallback_metrics"] = reuse.strip().lower() in _TRUTHY
        return cls.model_validate(data)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Settings":
        """Load settings from YAML. Supports a nested `source:` section or flat keys."""
        data = yaml.safe_load(Path(path).read_text()) or {}
        source = data.get("source", {}) or {}

        def _get(key: str, default=None):
            return source.get(key, data.get(key, default))

        flat: dict = {}
        for key, alias in (("source_url", "url"), ("results", None), ("seed", None), ("timeout", None)):
            value = _get(key)
            if value is None and alias:
                value = _get(alias)
            if value is not None:
                flat[key] = value
        reuse = data.get("reuse_fallback_metrics")
        if reuse is not None:
            flat["reuse_fallback_metrics"] = reuse
        if flat.get("seed") is not None:
            flat["seed"] = str(flat["seed"])
        return cls.model_validate(flat)
