from __future__ import annotations

from pathlib import Path

import pandas as pd

from .schema import EVENT_COLUMNS, REPORT_COLUMNS, REQUIRED_EVENT_COLUMNS

EXCEL_SUFFIXES = {".xlsx", ".xlsm"}


def load_event_frame(path: Path) -> pd.DataFrame:
    """Read a field event table (CSV or Excel) with every cell as text.

    返回:
        pd.DataFrame: 示例：columns ["event", "value", "attribute"]，空单元格为 ""
    """
    if not path.exists():
        raise FileNotFoundError(f"event table not found: {path}")
    if path.suffix.lower() in EXCEL_SUFFIXES:
        frame = pd.read_excel(path, dtype=str)
    else:
        frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    frame.columns = [str(column).strip().lower() for column in frame.columns]
    missing = [column for column in REQUIRED_EVENT_COLUMNS if column not in frame.columns]
    if missing:
        raise ValueError(f"event table {path} is missing columns: {', '.join(missing)}")
    for column in EVENT_COLUMNS:
        if column not in frame.columns:
            frame[column] = ""  # 可选列缺失时补空
    frame = frame[EVENT_COLUMNS].fillna("")
    frame["event"] = frame["event"].str.strip().str.lower()
    frame["attribute"] = frame["attribute"].str.strip()
    return frame.reset_index(drop=True)


def write_report(frame: pd.DataFrame, output_path: Path) -> None:
    """Write the replay report; the suffix picks Excel or CSV."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    frame = frame.reindex(columns=REPORT_COLUMNS)
    if output_path.suffix.lower() in EXCEL_SUFFIXES:
        with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
            frame.to_excel(writer, sheet_name="replay", index=False)
    else:
        frame.to_csv(output_path, index=False, encoding="utf-8-sig")
