"""
Runs all the workshop scripts in this directory.

Figures are drawn with the non-interactive Agg backend, so the scripts run
without a display; `plt.show()` returns immediately. The scripts may be run
from any working directory. `color.py` downloads the penguins on first use.
"""

import glob
import os

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt  # pylint: disable=wrong-import-position

os.chdir(os.path.dirname(os.path.abspath(__file__)))
scripts = sorted(set(glob.glob("*.py")).difference([os.path.basename(__file__)]))
for script in scripts:
    print("-" * 70)
    print(script)
    print()
    with open(script) as f:
        exec(compile(f.read(), script, "exec"), {"__name__": "__main__"})
    plt.close("all")
