import sys
from pathlib import Path

# Ensure the repository root is in sys.path so 'yamltree' and 'apps' import as packages
# when pytest runs from the root or from a subdirectory
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))
