from __future__ import annotations

import logging
import time

import orjson


def log_event(module: str, event: str, **kwargs) -> None:
    """Structured event logging through the central logger.

    Emits a single JSON line via the Python logging system so it reaches the
    central log file configured by logging_setup.setup_logging().
    """
    payload = {"ts": time.time(), "module": module, "event": event}
    payload.update(kwargs)
    try:
        line = orjson.dumps(payload, default=str).decode("utf-8")
    except TypeError:
        logging.getLogger("event").exception("failed to log event: %s", {"module": module, "event": event})
        return
    logging.getLogger(f"event.{module}").info(line)
