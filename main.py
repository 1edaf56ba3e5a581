# main.py
import sys
from pathlib import Path

# Ensure src/ is importable when running from a checkout
SRC = Path(__file__).resolve().parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from wayfind.cli import main  # noqa: E402

if __name__ == "__main__":
    raise SystemExit(main())
