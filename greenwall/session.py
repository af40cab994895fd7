"""
Session configuration for greenwall.

A session holds the identity commits are recorded under and the intensity
that drives the pattern generator. It is assembled once, from a YAML session
file, CLI flags and interactive prompts, before any repository work starts.
"""
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field, validator


DEFAULT_PROJECT_DIRNAME = "contribution_project"
DATA_DIRNAME = "data"

SESSION_FIELDS = ('user_name', 'user_email', 'intensity', 'project_dir', 'seed')
REQUIRED_FIELDS = ('user_name', 'user_email', 'intensity')


class SessionConfigError(ValueError):
    """Raised when a session file is malformed."""
    pass


def default_project_dir() -> Path:
    """Working subdirectory under the current directory."""
    return Path.cwd() / DEFAULT_PROJECT_DIRNAME


class SessionConfig(BaseModel):
    """Immutable parameters for one generation run."""
    user_name: str
    user_email: str
    intensity: float = Field(..., description="Probability a day gets commits; not range-checked")
    project_dir: Path = Field(default_factory=default_project_dir)
    seed: Optional[int] = Field(None, description="Seed for the random source")

    class Config:
        frozen = True

    @validator('intensity')
    def reject_nan_intensity(cls, v):
        if v != v:
            raise ValueError("intensity must be a number, got NaN")
        return v

    @validator('project_dir')
    def expand_project_dir(cls, v):
        return Path(v).expanduser()

    @property
    def data_dir(self) -> Path:
        """Directory holding the per-day entry files."""
        return self.project_dir / DATA_DIRNAME


def load_session_file(yaml_path: Path) -> Dict[str, Any]:
    """
    Load session values from a YAML file.

    The file may supply any subset of the session fields; anything missing is
    filled in later from CLI flags or prompts.

    Args:
        yaml_path: Path to session YAML file

    Returns:
        Dict of session field values found in the file

    Raises:
        FileNotFoundError: If the file doesn't exist
        SessionConfigError: If the file isn't a mapping or has unknown keys
    """
    if not yaml_path.exists():
        raise FileNotFoundError(f"Session file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SessionConfigError(f"Session file must be a mapping: {yaml_path}")

    unknown = [key for key in data if key not in SESSION_FIELDS]
    if unknown:
        raise SessionConfigError(f"Unknown fields in {yaml_path}: {', '.join(sorted(unknown))}")

    return data


def missing_fields(values: Dict[str, Any]) -> list:
    """Required session fields not yet supplied, in prompt order."""
    return [name for name in REQUIRED_FIELDS if values.get(name) is None]
