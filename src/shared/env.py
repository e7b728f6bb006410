"""Environment utilities for resolving Docker-style secret files."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def load_secret_file_variables() -> None:
    """
    Expose ``KEY_FILE`` secrets as ``KEY`` environment variables.

    Used for credentials such as AMBARI_PASSWORD_FILE. A KEY that is already
    set wins over its file. Unreadable files are logged and skipped.
    """

    for key, file_path in list(os.environ.items()):
        if not key.endswith("_FILE") or not file_path:
            continue
        target_key = key[: -len("_FILE")]
        if os.environ.get(target_key):
            continue

        context = {"key": key, "path": file_path}
        try:
            os.environ[target_key] = Path(file_path).read_text(encoding="utf-8").strip()
        except FileNotFoundError as exc:
            logger.warning(
                "env.secret_file.missing", extra={**context, "error": str(exc)}
            )
        except UnicodeDecodeError as exc:
            logger.warning(
                "env.secret_file.decode_failed", extra={**context, "error": str(exc)}
            )
        except OSError as exc:
            logger.warning(
                "env.secret_file.load_failed", extra={**context, "error": str(exc)}
            )


load_secret_file_variables()
