# Automatically add the project root to sys.path for pytest discovery of voronoi/ and render.py
import sys
from pathlib import Path

ROOT = Path(__file__).parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
