"""
Arenagraph Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Library configuration loaded from environment variables."""

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent

    # Graph behaviour
    # Strict mode raises GraphError subclasses instead of ignoring invalid operations
    STRICT_MODE: bool = _env_flag("ARENAGRAPH_STRICT", False)
    # Report ignored operations (duplicate nodes, rejected edges) on the console
    DIAGNOSTICS: bool = _env_flag("ARENAGRAPH_DIAGNOSTICS", True)

    # Where GraphLoader looks for "<name>.json" arena files
    GRAPHS_DIR: Path = Path(
        os.getenv("ARENAGRAPH_GRAPHS_DIR", str(PROJECT_ROOT / "data"))
    )

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.GRAPHS_DIR.exists() and not cls.GRAPHS_DIR.is_dir():
            raise ValueError(
                f"ARENAGRAPH_GRAPHS_DIR must point to a directory, got file {cls.GRAPHS_DIR}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Arenagraph Configuration:",
            f"  Strict Mode: {cls.STRICT_MODE}",
            f"  Diagnostics: {cls.DIAGNOSTICS}",
            f"  Graphs Dir: {cls.GRAPHS_DIR}",
        ]
        return "\n".join(lines)
