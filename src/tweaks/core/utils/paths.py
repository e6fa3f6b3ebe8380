import os
from pathlib import Path

# Repository root (src/tweaks/core/utils -> repo)
PROJECT_ROOT = Path(__file__).parent.parent.parent.parent.parent
# Allow override for containers/CI: state dir outside the home folder (e.g. TWEAKS_HOME=/data)
_home_env = os.getenv("TWEAKS_HOME")
TWEAKS_HOME = Path(_home_env).expanduser().resolve() if _home_env else (Path.home() / ".tweaks")

DEFAULT_STORE_PATH = str(TWEAKS_HOME / "overrides.json")
