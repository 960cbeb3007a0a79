"""
Earnings Store - read access to per-company insight records.

Each tracked company has one JSON file ``<TICKER>.json`` in the earnings
data directory, written by the extraction pipeline:

    {
      "company": {...},
      "reports": [{"quarter": "Q4 2024", "filing": {...}, "insights": {...}}, ...],
      "totalFetched": 12,
      "successfulAnalyses": 11,
      "lastUpdated": "2025-02-01T10:00:00Z"
    }

Loading is skip-and-log: a file that cannot be read or validated is left
out of the mapping with a warning, the rest of the universe still loads.
"""

import json
from pathlib import Path
from typing import Dict, Optional, Union

from pydantic import ValidationError

from config.constants import EARNINGS_FILE_SUFFIX, MACRO_LATEST_FILENAME
from config.settings import settings
from utils.logger import setup_logger
from utils.unified_schema import CompanyEarningsData, MacroAnalysis

logger = setup_logger('earnings_store')

PathLike = Union[str, Path]


def _read_earnings_file(file_path: Path) -> Optional[CompanyEarningsData]:
    """Parse one company file; None (logged) when it cannot be used."""
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            raw = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Skipping {file_path.name}: unreadable ({e})")
        return None

    try:
        return CompanyEarningsData.model_validate(raw)
    except ValidationError as e:
        logger.warning(f"Skipping {file_path.name}: invalid record set ({e.error_count()} errors)")
        return None


def load_all_earnings_data(data_dir: Optional[PathLike] = None) -> Dict[str, CompanyEarningsData]:
    """
    Load every company record set in the earnings directory.

    Args:
        data_dir: Directory of ``<TICKER>.json`` files (default: settings)

    Returns:
        Mapping ticker -> record set, in sorted filename order
    """
    directory = Path(data_dir) if data_dir is not None else settings.earnings_data_dir
    data_map: Dict[str, CompanyEarningsData] = {}

    if not directory.is_dir():
        logger.error(f"Earnings data directory not found: {directory}")
        return data_map

    for file_path in sorted(directory.glob(f"*{EARNINGS_FILE_SUFFIX}")):
        data = _read_earnings_file(file_path)
        if data is not None:
            data_map[file_path.stem.upper()] = data

    logger.info(f"Loaded earnings data for {len(data_map)} companies from {directory}")
    return data_map


def get_cached_earnings(ticker: str, data_dir: Optional[PathLike] = None) -> Optional[CompanyEarningsData]:
    """
    Load cached earnings data for a single company.

    Returns:
        Record set, or None if no usable cached data exists
    """
    directory = Path(data_dir) if data_dir is not None else settings.earnings_data_dir
    file_path = directory / f"{ticker.upper()}{EARNINGS_FILE_SUFFIX}"
    if not file_path.exists():
        return None
    return _read_earnings_file(file_path)


def has_cached_earnings(ticker: str, data_dir: Optional[PathLike] = None) -> bool:
    """Check if a cached data file exists for a company."""
    directory = Path(data_dir) if data_dir is not None else settings.earnings_data_dir
    return (directory / f"{ticker.upper()}{EARNINGS_FILE_SUFFIX}").exists()


def save_macro_analysis(analysis: MacroAnalysis, output_dir: Optional[PathLike] = None) -> Path:
    """
    Write the macro analysis snapshot as camelCase JSON.

    Returns:
        Path of the written ``latest.json``
    """
    directory = Path(output_dir) if output_dir is not None else settings.macro_data_dir
    directory.mkdir(parents=True, exist_ok=True)

    output_path = directory / MACRO_LATEST_FILENAME
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(analysis.model_dump(mode='json', by_alias=True), f, indent=2)

    logger.info(f"Macro analysis saved to {output_path}")
    return output_path
