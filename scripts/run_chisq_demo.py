#!/usr/bin/env python3
"""
Run the worked chi-square examples and print their reports.

Goodness of fit: http://www.stat.yale.edu/Courses/1997-98/101/chigf.htm
Independence: http://stattrek.com/chi-square-test/independence.aspx
"""

import logging
import sys
from pathlib import Path

import pandas as pd

ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT / "src"))

logging.basicConfig(level=logging.INFO)


def main():
    from chisqtest import chisq_test, format_result

    print("1. Goodness of fit...")
    counts = [48, 35, 15, 3]
    probs = [0.58, 0.345, 0.07, 0.005]
    print(format_result(chisq_test(counts, {"probs": probs})))

    # Voting preferences by gender
    table = pd.DataFrame(
        [[200, 150, 50], [250, 300, 50]],
        index=["Male", "Female"],
        columns=["Republican", "Democrat", "Independent"],
    )

    print("2. Independence, no continuity correction...")
    print(format_result(chisq_test(table, {"correct": False})))

    # Republican vs Democrat only
    print("3. Independence, 2x2 table with Yates' correction...")
    print(format_result(chisq_test(table[["Republican", "Democrat"]], {"correct": True})))


if __name__ == "__main__":
    main()
