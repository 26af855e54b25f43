from __future__ import annotations

import os
import re
import subprocess
import sys
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List

from framework.reporting.results import CaseResult, count_results, load_results_json, write_results_json
from framework.utils.config_loader import load_config
from framework.utils.html_report import build_html_report
from framework.utils.logger import get_logger

log = get_logger()

FEATURE_TESTS = "tests/step_defs"


def _now_ts() -> str:
    return time.strftime("%Y%m%d_%H%M%S")


def _ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def _safe_name(s: str) -> str:
    return re.sub(r"[^A-Za-z0-9_.=-]+", "_", s).strip("_")


def parse_collected_nodeids(output: str) -> List[str]:
    """Author: taobo.zhou
    中文：从 pytest --collect-only -q 输出中解析用例 nodeid。
    参数:
        output: pytest 标准输出。
    """

    return [
        line.strip()
        for line in output.splitlines()
        if "::" in line and not line.startswith(("=", " "))
    ]


def _collect_scenarios(project_root: Path) -> List[str]:
    """Author: taobo.zhou
    中文：收集所有 @ui 场景的 nodeid，每个场景独立运行。
    参数:
        project_root: 项目根目录。
    """

    cmd = [sys.executable, "-m", "pytest", "--collect-only", "-q", "-m", "ui", FEATURE_TESTS]
    completed = subprocess.run(cmd, cwd=str(project_root), capture_output=True, text=True)
    nodeids = parse_collected_nodeids(completed.stdout)
    if not nodeids:
        raise RuntimeError(f"No @ui scenarios collected:\n{completed.stdout}\n{completed.stderr}")
    return nodeids


def build_worker_cmd(nodeid: str, run_dir: Path, extra_args: List[str]) -> List[str]:
    return [
        sys.executable,
        "-m",
        "pytest",
        "-q",
        "-m",
        "ui",
        "--pw-worker",
        "--pw-run-dir",
        str(run_dir),
        f"--cucumberjson={run_dir / 'reports' / 'cucumber.json'}",
        *extra_args,
        nodeid,
    ]


def _run_scenario(nodeid: str, run_dir: Path, project_root: Path, extra_args: List[str]) -> int:
    """Author: taobo.zhou
    中文：在独立 pytest 进程中运行单个场景（独立浏览器会话）。
    参数:
        nodeid: 场景 nodeid。
        run_dir: 当前场景的运行目录。
        project_root: 项目根目录。
        extra_args: 透传给 pytest 的参数，例如 --headless。
    """

    env = os.environ.copy()
    env["PW_WORKER"] = "1"

    cmd = build_worker_cmd(nodeid, run_dir, extra_args)
    log.info("[PW][RUN] %s", " ".join(cmd))
    completed = subprocess.run(cmd, env=env, cwd=str(project_root))
    return completed.returncode


def collect_results(run_dirs: Dict[str, Path]) -> List[CaseResult]:
    """Author: taobo.zhou
    中文：汇总所有场景 worker 的 results.json；缺失时记为 ERROR。
    参数:
        run_dirs: nodeid -> 运行目录。
    """

    results: List[CaseResult] = []
    for nodeid, run_dir in run_dirs.items():
        result_path = run_dir / "reports" / "results.json"
        if not result_path.exists():
            log.error("[PW][SUMMARY] missing results.json for %s", nodeid)
            results.append(CaseResult(
                case_id=nodeid,
                feature="-",
                status="ERROR",
                error="worker produced no results.json",
                screenshot=None,
                nodeid=nodeid,
                start_time="-",
                end_time="-",
            ))
            continue
        results.extend(load_results_json(result_path))
    return results


def main(argv: List[str] | None = None) -> int:
    """Author: taobo.zhou
    中文：主入口，并行执行所有场景并汇总报告。
    参数:
        argv: 透传给 pytest worker 的参数。
    """

    extra_args = list(sys.argv[1:] if argv is None else argv)

    cfg = load_config()
    max_workers = int(cfg.get("runner", {}).get("max_workers", 1))
    project_root = Path(cfg.get("_project_root", "."))

    nodeids = _collect_scenarios(project_root)

    ts = _now_ts()
    run_root = project_root / "output" / "runs" / ts
    run_dirs = {nodeid: run_root / _safe_name(nodeid.split("::", 1)[-1]) for nodeid in nodeids}
    for run_dir in run_dirs.values():
        _ensure_dir(run_dir / "screenshots")
        _ensure_dir(run_dir / "reports")

    log.info("[PW] %d scenarios, max_workers=%d, run_root=%s", len(nodeids), max_workers, run_root)

    returncodes = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        futures = {
            executor.submit(_run_scenario, nodeid, run_dir, project_root, extra_args): nodeid
            for nodeid, run_dir in run_dirs.items()
        }
        for future in as_completed(futures):
            nodeid = futures[future]
            try:
                returncodes[nodeid] = future.result()
            except Exception as exc:
                log.error("[PW][RUN] %s failed: %s", nodeid, exc)
                returncodes[nodeid] = 1

    results = collect_results(run_dirs)
    counts = count_results(results)

    reports_dir = run_root / "reports"
    write_results_json(results, reports_dir / "summary.json")
    report_path = reports_dir / f"report_{ts}.html"
    report_path.write_text(build_html_report(results), encoding="utf-8")
    log.info(f"[PW][REPORT] {report_path} counts={counts}")

    if counts["failed"] > 0 or counts["error"] > 0:
        return 1
    if any(code != 0 for code in returncodes.values()):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
