import sys
from pathlib import Path

# Deployment scripts are run from the repo root as `scripts/deploy.py` and
# import each other by module name.
_scripts_dir = str(Path(__file__).parents[2] / 'scripts')
if _scripts_dir not in sys.path:
    sys.path.insert(0, _scripts_dir)
