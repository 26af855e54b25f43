"""HTML 报告构建模块。

HTML report builder module.

作者: taobo.zhou
Author: taobo.zhou
"""

from __future__ import annotations

from datetime import datetime
from html import escape
from typing import Any, List
import os


def build_html_report(results: List[Any], title: str = "OpenCart 登录 UI 自动化测试报告") -> str:
    rows_html = []

    for r in results:
        params = r.params or {}
        params_main = " / ".join(f"{k}={v}" for k, v in params.items()) or "-"

        if r.screenshot and os.path.exists(r.screenshot):
            name = os.path.basename(r.screenshot)
            screenshots_html = (
                f"<div>📷 <a href='file://{escape(r.screenshot)}'>{escape(name)}</a></div>"
            )
        elif r.status in ("FAIL", "ERROR"):
            screenshots_html = "<div class='muted'>⚠ 截图缺失</div>"
        else:
            screenshots_html = ""

        error_html = (
            f"<pre>{escape(r.error)}</pre>"
            if r.error
            else "<div class='muted'>无失败日志</div>"
        )

        rows_html.append(
            f"""
<tr>
  <td>
    <b>{escape(r.case_id)}</b>
    <div class="muted">{escape(r.feature)}</div>
  </td>
  <td>{escape(params_main)}</td>
  <td>{escape(r.start_time)}</td>
  <td>{escape(r.end_time)}</td>
  <td>
    <span class="status {escape(r.status)}">● {escape(r.status)}</span>
  </td>
  <td>
    <details>
      <summary>展开备注</summary>
      {screenshots_html}
      {error_html}
    </details>
  </td>
</tr>
"""
        )

    total = len(results)
    passed = sum(1 for r in results if r.status == "PASS")

    return f"""
<!doctype html>
<html>
<head>
<meta charset="utf-8">
<title>{escape(title)}</title>
<style>
body {{
  font-family: Arial, sans-serif;
  font-size: 13px;
  color: #222;
}}
table {{
  width: 100%;
  border-collapse: collapse;
}}
th, td {{
  border-bottom: 1px solid #ddd;
  padding: 8px;
  vertical-align: top;
}}
th {{ background: #f5f5f5; }}
.status.PASS {{ color: #1a7f37; }}
.status.FAIL {{ color: #d1242f; }}
.status.ERROR {{ color: #bc4c00; }}
.status.SKIP {{ color: #777; }}
.muted {{ color: #777; }}
details summary {{
  cursor: pointer;
  color: #0969da;
}}
pre {{
  background: #f6f8fa;
  padding: 8px;
  white-space: pre-wrap;
}}
</style>
</head>

<body>
<h2>{escape(title)}</h2>
<p>生成时间：{datetime.now().strftime("%Y-%m-%d %H:%M:%S")}</p>
<p>Total={total} Pass={passed}</p>

<table>
<thead>
<tr>
  <th>场景</th>
  <th>示例参数</th>
  <th>开始时间</th>
  <th>结束时间</th>
  <th>结果</th>
  <th>备注</th>
</tr>
</thead>
<tbody>
{''.join(rows_html)}
</tbody>
</table>

</body>
</html>
"""
