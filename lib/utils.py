"""
Common utilities for the line Markdown converter.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


def jsonDumps(data: Any, compact: Optional[bool] = None, **kwargs) -> str:
    """
    Serialize data to JSON, non-ASCII kept as is.

    Compact separators are used unless `indent` is passed or `compact` is set
    explicitly.
    """
    dumpKwargs: Dict[str, Any] = {
        "ensure_ascii": False,
        "default": str,
        "sort_keys": True,
    }

    if compact is None:
        compact = "indent" not in kwargs

    if compact:
        dumpKwargs["separators"] = (",", ":")
    dumpKwargs.update(kwargs)
    return json.dumps(data, **dumpKwargs)


def loadDotEnv(path: str = ".env", populateEnv: bool = True) -> Dict[str, str]:
    """
    Simple dotenv file loader.

    Reads `KEY=value` lines, skipping comments and malformed lines. A missing
    file is not an error.

    Args:
        path: Path to .env file (default ".env")
        populateEnv: Whether to put the values into os.environ (default True)

    Returns:
        Dictionary of key-value pairs from .env file
    """
    ret: Dict[str, str] = {}
    envPath = Path(path)
    if not envPath.is_file():
        return ret

    with open(envPath, "rt", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            key, value = line.split("=", 1)
            ret[key.strip()] = value.strip().strip('"')

    if populateEnv:
        for k, v in ret.items():
            os.environ.setdefault(k, v)
    logger.debug(f"Loaded {len(ret)} variable(s) from {path}")
    return ret
