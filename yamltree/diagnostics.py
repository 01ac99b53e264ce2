from __future__ import annotations

import sys
from datetime import datetime, timezone

from yamltree import config


def log(line: str) -> None:
  """Log a diagnostic to stderr and, if configured, to the log file.

  Args:
    line: Log message
  """
  timestamp = datetime.now(timezone.utc).isoformat()
  message = f"[{timestamp}] yamltree: {line}"
  print(message, file=sys.stderr)
  if config.LOG_FILE is None:
    return
  try:
    config.LOG_FILE.parent.mkdir(parents=True, exist_ok=True)
    with config.LOG_FILE.open("a", encoding="utf-8") as handle:
      handle.write(message + "\n")
  except OSError as exc:
    print(f"[{timestamp}] yamltree: cannot write log file {config.LOG_FILE}: {exc}", file=sys.stderr)
