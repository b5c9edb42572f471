"""Credibility report storage (store-and-forget).

Keeps a copy of each finished report for history. The pipeline never reads
reports back; callers such as the CLI decide whether to save.

- O(1) lookup by report_id
- Safe for concurrent use with an asyncio lock
- Optional JSON persistence

Usage:
    from credibility_system.data_management.report_store import ReportStore

    store = ReportStore()
    report_id = await store.save_report(report)
    record = await store.get_report(report_id)
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Optional

from credibility_system.data_management.schemas import CredibilityReport, ReportRecord
from credibility_system.utils.logging import get_structured_logger


class ReportStore:
    """Storage for credibility report records.

    Data structure:
    {
        report_id: ReportRecord,
        ...
    }
    """

    def __init__(self, persistence_path: Optional[str] = None) -> None:
        """Initialize ReportStore.

        Args:
            persistence_path: Optional path to JSON file for persistence.
                            If None, storage is memory-only.
        """
        self._records: dict[str, ReportRecord] = {}
        self._lock = asyncio.Lock()
        self._persistence_path = Path(persistence_path) if persistence_path else None
        self._logger = get_structured_logger("ReportStore")

        if self._persistence_path and self._persistence_path.exists():
            self._load_from_file()

    async def save_report(self, report: CredibilityReport) -> str:
        """Store a copy of ``report`` and return its record id."""
        record = ReportRecord.from_report(report)
        async with self._lock:
            self._records[record.report_id] = record
            self._logger.debug(
                "report_saved",
                report_id=record.report_id,
                reliability=record.reliability,
            )
            if self._persistence_path:
                self._save_to_file()
        return record.report_id

    async def get_report(self, report_id: str) -> Optional[ReportRecord]:
        async with self._lock:
            return self._records.get(report_id)

    async def list_reports(self, limit: Optional[int] = None) -> list[ReportRecord]:
        """Records newest first."""
        async with self._lock:
            records = sorted(self._records.values(), key=lambda r: r.stored_at, reverse=True)
        return records[:limit] if limit is not None else records

    async def get_stats(self) -> dict[str, Any]:
        """Counts by reliability label and verification verdict."""
        async with self._lock:
            by_reliability: dict[str, int] = {}
            by_verdict: dict[str, int] = {}
            for record in self._records.values():
                by_reliability[record.reliability] = by_reliability.get(record.reliability, 0) + 1
                verdict = record.news_verification.verdict
                by_verdict[verdict] = by_verdict.get(verdict, 0) + 1
            return {
                "total": len(self._records),
                "by_reliability": by_reliability,
                "by_verdict": by_verdict,
            }

    def _save_to_file(self) -> None:
        """Save to JSON file (synchronous)."""
        if not self._persistence_path:
            return
        try:
            self._persistence_path.parent.mkdir(parents=True, exist_ok=True)
            data = {
                rid: record.model_dump(mode="json", by_alias=True)
                for rid, record in self._records.items()
            }
            with open(self._persistence_path, "w") as f:
                json.dump(data, f, indent=2, default=str)
        except OSError as e:
            self._logger.error("persistence_failed", error=str(e))

    def _load_from_file(self) -> None:
        try:
            with open(self._persistence_path) as f:
                data = json.load(f)
            self._records = {
                rid: ReportRecord.model_validate(payload) for rid, payload in data.items()
            }
            self._logger.debug("reports_loaded", count=len(self._records))
        except (OSError, ValueError) as e:
            self._logger.error("load_failed", error=str(e))
