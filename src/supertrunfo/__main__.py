"""CLI entrypoint: python -m supertrunfo [play|app]."""

import sys
from pathlib import Path

# Ensure src is on path when run as python -m supertrunfo
if __name__ == "__main__":
    src = Path(__file__).resolve().parent.parent
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

import argparse
import logging
from typing import List, Optional

from supertrunfo.collect.collector import Reader, collect_card
from supertrunfo.collect.errors import InputClosedError
from supertrunfo.report.render import render_report


def _play(read: Reader, chart: Optional[str]) -> int:
    try:
        card_1 = collect_card(1, read=read)
        print()
        card_2 = collect_card(2, read=read)
    except InputClosedError as e:
        print(f"\n{e}")
        return 1
    print(render_report(card_1, card_2))
    if chart:
        from supertrunfo.viz.card_compare import render_card_comparison
        path = render_card_comparison(card_1, card_2, outpath=chart)
        print("\nGrafico salvo:", path)
    return 0


def _app() -> None:
    import subprocess
    app_path = Path(__file__).resolve().parent / "app" / "streamlit_app.py"
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)], check=True)


def main(argv: Optional[List[str]] = None, read: Reader = input) -> int:
    p = argparse.ArgumentParser(description="Super Trunfo - Paises")
    p.add_argument("cmd", nargs="?", default="play", choices=["play", "app"],
                   help="play: cadastrar e comparar duas cartas no terminal; app: Streamlit")
    p.add_argument("--chart", metavar="PATH", default=None,
                   help="also save the comparison chart (PNG) to PATH")
    p.add_argument("-v", "--verbose", action="store_true", help="log to stderr")
    args = p.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s %(message)s")
    if args.cmd == "app":
        _app()
        return 0
    return _play(read, args.chart)


if __name__ == "__main__":
    sys.exit(main())
