"""CSV ingestion for the state's district enrollment and test extracts."""

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from config.settings import get_settings, DATA_FILES
from .clean import three_truncate
from .models import (
    District,
    Enrollment,
    MISSING,
    Numeric,
    Score,
    StatewideTest,
    Subject,
)

logger = logging.getLogger(__name__)

ENROLLMENT_FILES = ("kindergarten_participation", "high_school_graduation")
STATEWIDE_TEST_FILES = ("third_grade", "eighth_grade")


def _read_extract(path: Path) -> pd.DataFrame:
    """Read one extract as strings; empty frame if the file is unusable."""
    if not path.exists():
        logger.warning("Data file not found, skipping: %s", path)
        return pd.DataFrame()

    try:
        df = pd.read_csv(path, dtype=str, keep_default_na=False)
    except (pd.errors.ParserError, pd.errors.EmptyDataError, UnicodeDecodeError) as e:
        logger.error("Failed to read %s: %s", path, e)
        return pd.DataFrame()

    df.columns = [c.strip() for c in df.columns]
    required = {"Location", "TimeFrame", "Data"}
    if not required.issubset(df.columns):
        logger.error("%s is missing columns %s", path.name, sorted(required - set(df.columns)))
        return pd.DataFrame()

    # Some extracts mix counts and percentages; only rates are analysed
    if "DataFormat" in df.columns:
        df = df[df["DataFormat"].str.strip().str.lower().isin(["percent", ""])]

    df = df.copy()
    df["location"] = df["Location"].str.strip().str.upper()
    df["year"] = pd.to_numeric(df["TimeFrame"], errors="coerce")
    df["value"] = pd.to_numeric(df["Data"], errors="coerce")
    return df


def load_enrollment_file(path: Path) -> dict[str, dict[int, float]]:
    """Load a rate-per-year extract: {LOCATION: {year: rate}}."""
    df = _read_extract(path)
    if df.empty:
        return {}

    malformed = df["year"].isna() | df["value"].isna()
    if malformed.any():
        logger.warning("Dropping %d malformed rows from %s", int(malformed.sum()), path.name)
    df = df[~malformed]

    rates: dict[str, dict[int, float]] = {}
    for row in df.itertuples(index=False):
        rates.setdefault(row.location, {})[int(row.year)] = three_truncate(row.value)
    return rates


def load_statewide_test_file(path: Path) -> dict[str, dict[int, dict[Subject, Score]]]:
    """Load a proficiency extract: {LOCATION: {year: {subject: score}}}.

    Unparseable scores (N/A, LNE, #VALUE!, blanks) are kept as MISSING so the
    year range resolver can step over them.
    """
    df = _read_extract(path)
    if df.empty:
        return {}
    if "Score" not in df.columns:
        logger.error("%s has no Score column", path.name)
        return {}

    settings = get_settings()
    df = df[df["year"].isin(list(settings.years))]

    scores: dict[str, dict[int, dict[Subject, Score]]] = {}
    for row in df.itertuples(index=False):
        subject = _parse_subject(row.Score)
        if subject is None:
            logger.warning("Unknown subject %r in %s", row.Score, path.name)
            continue
        score = MISSING if pd.isna(row.value) else Numeric(three_truncate(row.value))
        scores.setdefault(row.location, {}).setdefault(int(row.year), {})[subject] = score
    return scores


def _parse_subject(value) -> Optional[Subject]:
    """Map an extract's Score column to a Subject, or None."""
    try:
        return Subject(str(value).strip().lower())
    except ValueError:
        return None


def load_districts(
    data_dir: Optional[Path] = None,
    data_files: Optional[dict] = None,
) -> dict[str, District]:
    """
    Build District records from the configured extracts.

    Every location named in any extract becomes a District; records a
    location is absent from are left empty.
    """
    data_dir = Path(data_dir) if data_dir else get_settings().data_dir
    data_files = data_files or DATA_FILES

    enrollment = {
        key: load_enrollment_file(data_dir / data_files[key])
        for key in ENROLLMENT_FILES
        if key in data_files
    }
    tests = {
        key: load_statewide_test_file(data_dir / data_files[key])
        for key in STATEWIDE_TEST_FILES
        if key in data_files
    }

    names: set[str] = set()
    for records in (*enrollment.values(), *tests.values()):
        names.update(records)

    districts = {}
    for name in sorted(names):
        districts[name] = District(
            name=name,
            statewide_test=StatewideTest(
                name=name,
                **{key: tests.get(key, {}).get(name, {}) for key in STATEWIDE_TEST_FILES},
            ),
            enrollment=Enrollment(
                name=name,
                **{key: enrollment.get(key, {}).get(name, {}) for key in ENROLLMENT_FILES},
            ),
        )

    logger.info("Loaded %d districts from %s", len(districts), data_dir)
    return districts
