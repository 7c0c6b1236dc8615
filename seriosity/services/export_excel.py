from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List

from seriosity.services.db import StoredEvaluation


def export_to_excel(rows: List[StoredEvaluation], out_path: Path) -> None:
    import openpyxl
    from openpyxl.styles import PatternFill

    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "interviews"

    headers = [
        "Subject",
        "Name",
        "Submission",
        "Evaluated at",
        "Score",
        "Explanation",
        "Offensive language",
        "Offensive excerpt",
        "Keywords",
        "Transcript",
    ]
    ws.append(headers)

    red = PatternFill(start_color="FFC7CE", end_color="FFC7CE", fill_type="solid")
    yellow = PatternFill(start_color="FFEB9C", end_color="FFEB9C", fill_type="solid")
    green = PatternFill(start_color="C6EFCE", end_color="C6EFCE", fill_type="solid")

    for r in rows:
        offensive = bool(r.flags.get("offensive")) or r.breakdown.get("languageScore") == 0
        ws.append(
            [
                r.subject_id,
                r.subject_name,
                r.submission_id,
                r.evaluated_at.strftime("%Y-%m-%d %H:%M:%S"),
                r.score,
                r.score_explanation,
                "YES" if offensive else "NO",
                r.offensive_excerpt,
                ", ".join(r.details.get("keywordsFound", [])),
                r.transcript,
            ]
        )
        cell = ws.cell(row=ws.max_row, column=5)
        if r.score <= 2:
            cell.fill = red
        elif r.score == 3:
            cell.fill = yellow
        else:
            cell.fill = green

    out_path.parent.mkdir(parents=True, exist_ok=True)
    wb.save(out_path)


def default_report_path(reports_dir: Path) -> Path:
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    return reports_dir / f"report_{ts}.xlsx"
