"""Application settings and configuration management."""

import os
from pathlib import Path
from functools import lru_cache

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Default location of the state CSV extracts (repo_root/data)
DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


class Settings:
    """Application settings loaded from environment variables."""

    # Data location
    HEADCOUNT_DATA_DIR: str = os.getenv("HEADCOUNT_DATA_DIR", str(DEFAULT_DATA_DIR))

    # Statewide test years covered by the dataset (closed range)
    FIRST_YEAR: int = int(os.getenv("HEADCOUNT_FIRST_YEAR", "2008"))
    LAST_YEAR: int = int(os.getenv("HEADCOUNT_LAST_YEAR", "2014"))

    # The aggregate record for the whole state, and the name callers use
    # to ask a statewide correlation question
    STATEWIDE_DISTRICT: str = "COLORADO"
    STATEWIDE_QUERY: str = "STATEWIDE"

    # Composite growth
    DEFAULT_WEIGHTING: dict = {"math": 0.333, "reading": 0.333, "writing": 0.333}

    # Correlation thresholds (inclusive)
    CORRELATION_LOWER_BOUND: float = 0.6
    CORRELATION_UPPER_BOUND: float = 1.5
    GROUP_CORRELATION_THRESHOLD: float = 0.70

    @property
    def data_dir(self) -> Path:
        return Path(self.HEADCOUNT_DATA_DIR)

    @property
    def years(self) -> range:
        """Every year in the dataset, earliest first."""
        return range(self.FIRST_YEAR, self.LAST_YEAR + 1)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# CSV extracts, keyed by the record they populate
DATA_FILES = {
    "kindergarten_participation": "Kindergartners in full-day program.csv",
    "high_school_graduation": "High school graduation rates.csv",
    "third_grade": "3rd grade students scoring proficient or above on the CSAP_TCAP.csv",
    "eighth_grade": "8th grade students scoring proficient or above on the CSAP_TCAP.csv",
}
