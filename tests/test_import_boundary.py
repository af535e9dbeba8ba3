from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

_ENV = {**os.environ, "PYTHONPATH": str(Path(__file__).resolve().parent.parent / "src")}


def test_cli_import_does_not_load_dspy() -> None:
    code = (
        "import sys\n"
        "import cli\n"
        "loaded = [name for name in sys.modules\n"
        "          if name == 'dspy' or name.startswith('dspy.')\n"
        "          or name == 'generation.dspy_generator']\n"
        "assert not loaded, loaded\n"
    )

    completed = subprocess.run(
        [sys.executable, "-c", code], capture_output=True, text=True, env=_ENV, check=False
    )

    assert completed.returncode == 0, completed.stderr
