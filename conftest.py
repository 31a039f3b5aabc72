# Ensure `import gridsurface` works from a fresh clone:
# put repo/python on sys.path so the package is importable without prior install.
import sys
from pathlib import Path


def _ensure_python_path():
    pkg_dir = Path(__file__).resolve().parent / "python"
    if str(pkg_dir) not in sys.path:
        sys.path.insert(0, str(pkg_dir))


_ensure_python_path()
