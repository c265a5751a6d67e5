#!/usr/bin/env python3
"""Direct launcher for the predictive finance dashboard.

Runs Streamlit on ``predictive_finance/dashboard.py`` with the project root
on the import path.
"""

import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
sys.path.insert(0, str(project_root))

from predictive_finance.logging_setup import configure_logging, get_logger  # noqa: E402

logger = get_logger("predictive_finance.launcher")

if __name__ == "__main__":
    configure_logging()
    app_path = project_root / "predictive_finance" / "dashboard.py"
    logger.info("Starting dashboard from %s", app_path)
    result = subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)], cwd=project_root)
    sys.exit(result.returncode)
