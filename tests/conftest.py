"""Make the flat top-level packages importable from a source checkout.

``rt_core``, ``rt_io``, ``plots``, ``scenes`` and ``scripts`` live at the
repository root without ``__init__.py`` files; running pytest without
``pip install -e .`` needs the root on ``sys.path``.
"""

from __future__ import annotations

import sys
from pathlib import Path

REPO_ROOT = str(Path(__file__).resolve().parents[1])
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)
