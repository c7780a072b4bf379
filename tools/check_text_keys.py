"""
Utility script to validate that every text key used in the bot exists.

Usage:
    python tools/check_text_keys.py

Source files under ``bot/`` are scanned for ``t("KEY")`` lookups and compared
with ``bot/texts/en.py``. Missing keys make the script exit with status 1;
unused keys are only reported.
"""

from __future__ import annotations

import re
import sys
from pathlib import Path

from bot.texts.en import HEADINGS, TEXTS

ROOT = Path(__file__).resolve().parents[1]
KEY_PATTERN = re.compile(r"""\bt\(\s*["']([A-Z0-9_]+)["']""")


def collect_used_keys(source_dir: Path = ROOT / "bot") -> set[str]:
    used: set[str] = set()
    for path in source_dir.rglob("*.py"):
        used.update(KEY_PATTERN.findall(path.read_text(encoding="utf-8")))
    return used


def find_missing_headings() -> dict[str, list[str]]:
    missing: dict[str, list[str]] = {}
    for key, lines in HEADINGS.items():
        text_lines = set(TEXTS.get(key, "").split("\n"))
        absent = [line for line in lines if line not in text_lines]
        if absent:
            missing[key] = absent
    return missing


def main() -> int:
    used = collect_used_keys()
    missing = sorted(used - TEXTS.keys())
    unused = sorted(TEXTS.keys() - used)

    print(f"missing: {missing or 'none'}")
    print(f"unused:  {unused or 'none'}")
    headings = find_missing_headings()
    for key, lines in headings.items():
        print(f"[{key}] headings not found in text: {lines}")

    return 1 if missing or headings else 0


if __name__ == "__main__":
    sys.exit(main())
