from __future__ import annotations

import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from quest import config
from quest.cases.exporters import dump_case
from quest.cases.mansion import load_case
from quest.investigation.session import start_session


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump the mansion layout and clue directory.")
    parser.add_argument("--case", type=str, default=None, help="Path to a YAML case file.")
    parser.add_argument("--out", type=str, default=None)
    parser.add_argument("--log-level", type=str, default=config.LOG_LEVEL)
    args = parser.parse_args()

    config.configure_logging(args.log_level)
    case = load_case(Path(args.case)) if args.case else load_case()
    session = start_session(case)
    output = dump_case(session)
    session.teardown()

    if args.out:
        with open(args.out, "w", encoding="utf-8") as handle:
            handle.write(output)
        print(f"Wrote case dump to {args.out}")
        return

    print(output)


if __name__ == "__main__":
    main()
