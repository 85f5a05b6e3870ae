from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from quest import config
from quest.cases.mansion import load_case
from quest.ui.app import QuestApp


def main() -> None:
    parser = argparse.ArgumentParser(description="Detective Quest Textual wrapper.")
    parser.add_argument("--case", type=str, default=None, help="Path to a YAML case file.")
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    args = parser.parse_args()

    config.configure_logging(args.log_level)
    case = load_case(Path(args.case)) if args.case else load_case()
    app = QuestApp(case=case)
    app.run()


if __name__ == "__main__":
    main()
