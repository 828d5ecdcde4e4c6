"""
Startet die Roster-Konsole (Studenten, Lehrende, Kurse) direkt aus dem Checkout.

    python run.py --file roster.txt

Nach "pip install -e ." gibt es dafür auch den Befehl "roster".
"""
from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent / "src"))

from roster.main import main

if __name__ == "__main__":
    main(sys.argv[1:])
