#!/usr/bin/env python3
"""
Generate outputs/card_compare.png: Sao Paulo vs Rio de Janeiro comparison chart.

Hardcoded cards; run from repo root.
"""

import sys
from pathlib import Path

repo = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(repo / "src"))

from supertrunfo.cards.card import Card
from supertrunfo.report.render import render_report
from supertrunfo.viz.card_compare import render_card_comparison

SAO_PAULO = Card(
    state="A",
    code="A01",
    city_name="Sao Paulo",
    population=12325000,
    area=1521.11,
    output=699.28,
    tourist_spots=50,
)
RIO = Card(
    state="B",
    code="B02",
    city_name="Rio de Janeiro",
    population=6748000,
    area=1200.25,
    output=300.50,
    tourist_spots=30,
)


def main() -> None:
    print(render_report(SAO_PAULO, RIO))
    outpath = repo / "outputs" / "card_compare.png"
    path = render_card_comparison(SAO_PAULO, RIO, outpath=str(outpath))
    print("Saved:", path)


if __name__ == "__main__":
    main()
