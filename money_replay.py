from __future__ import annotations

import argparse
import logging
from pathlib import Path

from money_input.logging_config import setup_logging
from money_input.replay import ReplayOptions, render_model, replay
from money_input.schema import UPDATE_ON_CHOICES


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="回放金额输入框事件表，逐步输出显示文本、模型值与校验状态。")
    parser.add_argument(
        "--events",
        type=Path,
        required=True,
        help="事件表 CSV/XLSX，列: event(text/blur/config/assign), value, attribute。",
    )
    parser.add_argument(
        "--markup",
        type=Path,
        help="包含 money 输入框的 HTML 文件，读取 min/max/precision/ng-model-options。",
    )
    parser.add_argument("--min", dest="min_value", help="最小值，覆盖 markup（默认: 0）。")
    parser.add_argument("--max", dest="max_value", help="最大值，覆盖 markup（默认: 不限）。")
    parser.add_argument(
        "--precision",
        help="小数位数，-1 关闭四舍五入（默认: 2）。",
    )
    parser.add_argument(
        "--update-on",
        choices=UPDATE_ON_CHOICES,
        help="default: 每次输入即解析；blur: 失焦时才解析。",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="报告输出路径，.xlsx 写 Excel，其余写 CSV。",
    )
    parser.add_argument("--verbose", action="store_true", help="输出 DEBUG 日志。")
    parser.add_argument("--log-file", help="同时写入日志文件。")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)
    attributes = {}
    for name, value in (("min", args.min_value), ("max", args.max_value), ("precision", args.precision)):
        if value is not None:
            attributes[name] = value
    options = ReplayOptions(
        events_path=args.events,
        output_path=args.output,
        markup=args.markup.read_text(encoding="utf-8") if args.markup else None,
        attributes=attributes,
        update_on=args.update_on,
    )
    result = replay(options)
    print("=== 回放完成 ===")
    print(f"事件 {result.events} 条，无效状态 {result.invalid_steps} 步。")
    print(f"显示: {result.display_text!r} | 模型值: {render_model(result.model_value) or '(空)'}")
    if result.output_path:
        print(f"报告: {result.output_path}")


if __name__ == "__main__":
    main()
