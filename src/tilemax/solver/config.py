"""Tilemax solver configuration."""

from dotenv import find_dotenv
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv(usecwd=True) or None


class SolverConfig(BaseSettings):
    """Configuration settings for the Tilemax solver."""

    deterministic: bool = True
    """Whether to explore candidate moves in a fixed (sorted) order. Default: True."""

    use_score_bound: bool = True
    """Whether to skip branches that cannot beat the best score found so far.

    The bound is the current score plus the points of every letter left in the pool, so it
    never changes the result.  Default: True.
    """

    report_interval: int = 10_000
    """Interval (in number of boards examined) at which to report progress. Default: 10,000."""

    trace: bool = True
    """Whether the solver writes its trace (initial, improved and final boards) to the log."""

    word_list_path: str = "words.txt"
    """Word list used when a puzzle file does not list its own words."""

    log_dir: str = "logs"
    """Directory for per-puzzle log files."""

    model_config = SettingsConfigDict(
        env_prefix="TILEMAX_",
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        extra="forbid",
    )


config = SolverConfig()
