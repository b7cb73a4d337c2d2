import logging
import time

logger = logging.getLogger('shapeshift')

_flow_log_last: dict[str, float] = {}


def log_flow(component: str, message: str, *, level: str = "DEBUG",
             throttle_key: str | None = None, every_s: float | None = None):
    """Timestamped, optionally throttled flow logging for layout diagnostics."""
    log_level = logging.getLevelName(level)
    if not isinstance(log_level, int):
        log_level = logging.DEBUG
    if not logger.isEnabledFor(log_level):
        return

    now = time.time()
    if throttle_key and every_s is not None:
        last = _flow_log_last.get(throttle_key, 0.0)
        if (now - last) < every_s:
            return
        _flow_log_last[throttle_key] = now
    ts = time.strftime("%H:%M:%S", time.localtime(now)) + f".{int((now % 1) * 1000):03d}"
    logger.log(log_level, f"[{ts}][TRACE][{component}][{level}] {message}")


def reset_throttle():
    _flow_log_last.clear()
