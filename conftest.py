"""Root conftest.py: ensures the local regwalk package takes precedence over any installed version."""

from __future__ import annotations

import sys
from pathlib import Path

# Insert src/ at the front of sys.path so that `import regwalk` always
# resolves to the local source tree.
_src_root = str(Path(__file__).parent / "src")
if _src_root not in sys.path:
    sys.path.insert(0, _src_root)
