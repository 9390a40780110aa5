"""Default configuration parameters for the term performance engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RankingParams:
    """Ranking slice parameters."""
    top_n: int = 3                      # Entries in the top performers slice
    bottom_n: int = 3                   # Entries in the bottom performers slice


@dataclass(frozen=True)
class CurveParams:
    """Normalized curve summary parameters."""
    round_digits: int = 2               # Rounding of price/percent change
    min_points: int = 2                 # Points needed to report a change


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DataParams:
    """Input file names used by the JSON providers."""
    series_file: str = "sp500_data.json"
    intervals_file: str = "presidents.json"


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    ranking: RankingParams
    curve: CurveParams
    logging: LoggingParams
    data: DataParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        ranking=RankingParams(),
        curve=CurveParams(),
        logging=LoggingParams(),
        data=DataParams(),
    )
