import argparse
import curses
import json
import logging
import os
import sys

import config_paths
from grid_config import GridConfig, GridConfigError, load_grid_file
from grid_prompt import GridPrompt, PromptAborted
from key_reader import KeyReader
from screen_layout import ScreenLayout

# Make ESC snappy
os.environ.setdefault("ESCDELAY", "25")

try:
    from _version import __version__
except Exception:
    __version__ = "0.0.0"

OUTPUT_EXTS = {".json", ".csv"}


def setup_logger(level: str, log_file: str) -> logging.Logger:
    """Send logs to a file; the terminal belongs to curses while the prompt runs."""
    root = logging.getLogger()
    root.setLevel(getattr(logging, level, logging.WARNING))
    try:
        config_paths.ensure_config_dirs()
        handler = logging.FileHandler(log_file, encoding="utf-8")
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )
    root.addHandler(handler)
    return root


def _split_labels(text):
    if text is None:
        return None
    return [part.strip() for part in text.split(",") if part.strip()]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gridprompt",
        description="Fill in a rows x columns grid of text from the terminal.",
    )
    parser.add_argument("grid_file", nargs="?", help="JSON file with message, rows, columns, page_size")
    parser.add_argument("--rows", help="comma separated row labels")
    parser.add_argument("--columns", help="comma separated column labels")
    parser.add_argument("-m", "--message", help="question shown above the grid")
    parser.add_argument("--page-size", type=int, help="rows visible at once")
    parser.add_argument("--no-instructions", action="store_true", help="hide the key help")
    parser.add_argument("-o", "--output", help="write the result to a .json or .csv file")
    parser.add_argument("-v", "--version", action="version", version=__version__)
    return parser


def build_config(args, cfg) -> GridConfig:
    page_size_default = cfg["PAGE_SIZE"]
    if args.grid_file:
        base = load_grid_file(args.grid_file, page_size_default=page_size_default)
        data = {
            "message": base.message,
            "rows": base.rows.names,
            "columns": base.columns.names,
            "page_size": base.page_size,
            "prefix": base.prefix,
        }
    else:
        data = {"message": "Fill in the grid", "page_size": page_size_default}

    rows = _split_labels(args.rows)
    columns = _split_labels(args.columns)
    if rows is not None:
        data["rows"] = rows
    if columns is not None:
        data["columns"] = columns
    if args.message is not None:
        data["message"] = args.message
    if args.page_size is not None:
        data["page_size"] = args.page_size
    return GridConfig.from_dict(data, page_size_default=page_size_default)


def write_output(path, result, frame) -> None:
    _, ext = os.path.splitext(path)
    if ext.lower() == ".csv":
        frame.to_csv(path)
        return
    with open(path, "w", encoding="utf-8") as f:
        json.dump(result, f, indent=2, ensure_ascii=False)
        f.write("\n")


def run_prompt(stdscr, config, show_instructions):
    layout = ScreenLayout(stdscr)
    prompt = GridPrompt(config, layout, show_instructions=show_instructions)
    result = prompt.run(KeyReader(stdscr))
    return result, prompt.frame_result(), layout.last_frame


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    cfg = config_paths.load_config()
    setup_logger(cfg["LOG_LEVEL"], config_paths.LOG_PATH)

    if args.output:
        _, ext = os.path.splitext(args.output)
        if ext.lower() not in OUTPUT_EXTS:
            print("error: --output must end in .json or .csv", file=sys.stderr)
            return 2

    try:
        config = build_config(args, cfg)
    except GridConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    show_instructions = cfg["SHOW_INSTRUCTIONS"] and not args.no_instructions

    try:
        result, frame, last = curses.wrapper(run_prompt, config, show_instructions)
    except KeyboardInterrupt:
        return 130
    except PromptAborted as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if last is not None:
        print(ScreenLayout.plain(last), file=sys.stderr)

    if args.output:
        write_output(args.output, result, frame)
    else:
        print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
