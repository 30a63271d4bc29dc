# data/importer.py
"""Bulk import of comma-separated employee and dish lines."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from restaurant_manager.utils.parse_utils import EmployeeRecord, parse_record_line

logger = logging.getLogger(__name__)


@dataclass
class ImportSummary:
    added: int = 0
    errors: int = 0
    messages: List[str] = field(default_factory=list)

    def text(self) -> str:
        if not self.added and self.errors and len(self.messages) == 1:
            return self.messages[0]
        return f"Load complete: {self.added} entries added, {self.errors} errors."


def import_lines(service, lines) -> ImportSummary:
    """
    Feed each non-blank line through the service's add operations.
    Bad lines are counted and described; they never stop the import.
    """
    summary = ImportSummary()
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        try:
            record = parse_record_line(line)
        except ValueError:
            summary.errors += 1
            summary.messages.append(f"Invalid line: {line}")
            continue

        if isinstance(record, EmployeeRecord):
            result = service.add_employee(*record)
            what = "employee"
        else:
            result = service.add_dish(*record)
            what = "dish"

        if result:
            summary.added += 1
        else:
            summary.errors += 1
            summary.messages.append(f"Failed to add {what}: {result.message}")
    logger.info("import finished: %d added, %d errors", summary.added, summary.errors)
    return summary


def import_records(service, path) -> ImportSummary:
    if path is None or not str(path).strip():
        return ImportSummary(errors=1, messages=["Filename cannot be empty."])
    file = Path(str(path).strip())
    if not file.is_file():
        return ImportSummary(errors=1, messages=[f"File not found: {file}"])
    try:
        text = file.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.warning("cannot read %s: %s", file, e)
        return ImportSummary(errors=1, messages=[f"Error: {e}"])
    return import_lines(service, text.splitlines())
