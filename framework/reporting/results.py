"""Scenario result records shared by the pytest hooks and the parallel runner."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

STATUSES = ("PASS", "FAIL", "ERROR", "SKIP")


@dataclass
class CaseResult:
    case_id: str
    feature: str
    status: str
    error: Optional[str]
    screenshot: Optional[str]
    nodeid: str
    start_time: str
    end_time: str
    params: Dict[str, str] = field(default_factory=dict)


def count_results(results: List[CaseResult]) -> Dict[str, int]:
    return {
        "total": len(results),
        "passed": sum(1 for r in results if r.status == "PASS"),
        "failed": sum(1 for r in results if r.status == "FAIL"),
        "error": sum(1 for r in results if r.status == "ERROR"),
        "skipped": sum(1 for r in results if r.status == "SKIP"),
    }


def write_results_json(results: List[CaseResult], path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(
            {"counts": count_results(results), "results": [asdict(r) for r in results]},
            f,
            ensure_ascii=False,
            indent=2,
        )
    return path


def load_results_json(path: Path) -> List[CaseResult]:
    """Author: taobo.zhou
    中文：读取 worker 写出的 results.json 并还原为 CaseResult 列表。
    参数:
        path: results.json 路径。
    """

    with path.open("r", encoding="utf-8") as f:
        payload = json.load(f)

    results = []
    for item in payload.get("results", []):
        status = str(item.get("status", "ERROR"))
        results.append(CaseResult(
            case_id=str(item.get("case_id", "")),
            feature=str(item.get("feature", "-")),
            status=status if status in STATUSES else "ERROR",
            error=item.get("error"),
            screenshot=item.get("screenshot"),
            nodeid=str(item.get("nodeid", "")),
            start_time=str(item.get("start_time", "-")),
            end_time=str(item.get("end_time", "-")),
            params=dict(item.get("params") or {}),
        ))
    return results
