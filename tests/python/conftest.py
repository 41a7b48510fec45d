import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))


@pytest.fixture
def quiet_settings():
    """Settings with every steering force switched off."""
    from flocking.config import Settings

    return Settings(
        population=0,
        cohesion_factor=0.0,
        separation_factor=0.0,
        alignment_factor=0.0,
        turn_speed_ratio=0.0,
        color_adapt_factor=0.0,
    )
