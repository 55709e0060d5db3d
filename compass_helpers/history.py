"""Saved analyses, one JSON file per record under ``data/``."""

import glob
import json
import logging
import re
import time
import uuid
from pathlib import Path
from typing import List, Optional

from compass_helpers.models import AnalysisData, AnalysisRecord

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

_AMOUNT_RE = re.compile(r"(\d[\d,]*(?:\.\d+)?)\s*([kK])?")


def _now_ms() -> int:
    return int(time.time() * 1000)


def _record_path(record_id: str, data_dir: Path) -> Path:
    if not re.fullmatch(r"[0-9a-f]{32}", record_id or ""):
        raise KeyError(record_id)
    return Path(data_dir) / f"analysis_{record_id}.json"


def save_analysis(data: AnalysisData, data_dir: Path = DATA_DIR) -> AnalysisRecord:
    data_dir = Path(data_dir)
    data_dir.mkdir(parents=True, exist_ok=True)
    record = AnalysisRecord(
        analysis=data.analysis,
        colleges=data.colleges,
        file_name=data.file_name,
        id=uuid.uuid4().hex,
        timestamp=_now_ms(),
    )
    path = _record_path(record.id, data_dir)
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(record.to_dict(), f, indent=4, ensure_ascii=False)
    logger.info("Saved analysis %s to %s", record.id, path)
    return record


def _read_record(path) -> AnalysisRecord:
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return AnalysisRecord.from_dict(data)


def list_analyses(data_dir: Path = DATA_DIR) -> List[AnalysisRecord]:
    """All saved records, newest first. Unreadable files are skipped."""
    records = []
    for file in glob.glob(str(Path(data_dir) / "analysis_*.json")):
        try:
            records.append(_read_record(file))
        except (OSError, ValueError, TypeError) as e:
            logger.warning("Could not load %s: %s", file, e)
    records.sort(key=lambda r: r.timestamp, reverse=True)
    return records


def load_analysis(record_id: str, data_dir: Path = DATA_DIR) -> AnalysisRecord:
    path = _record_path(record_id, data_dir)
    if not path.exists():
        raise KeyError(record_id)
    return _read_record(path)


def delete_analysis(record_id: str, data_dir: Path = DATA_DIR) -> bool:
    try:
        path = _record_path(record_id, data_dir)
    except KeyError:
        return False
    if not path.exists():
        return False
    path.unlink()
    logger.info("Deleted analysis %s", record_id)
    return True


def parse_amount(text: Optional[str]) -> Optional[float]:
    """First money figure in a free-text estimate, e.g. "$45,000 per year" -> 45000.0."""
    if not text:
        return None
    match = _AMOUNT_RE.search(text)
    if not match:
        return None
    value = float(match.group(1).replace(",", ""))
    if match.group(2):
        value *= 1000
    return value
