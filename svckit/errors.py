"""Error logging that records where an error was produced."""

import inspect
import json
import logging

logger = logging.getLogger("svckit")


def log_error(err):
    """Log ``err`` with the caller's file, line and function, then return it.

    ``None`` is passed through untouched so the helper can wrap any result.
    """
    if err is None:
        return None

    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is None:
        return err

    try:
        code = caller.f_code
        qualname = getattr(code, "co_qualname", code.co_name)
        module = inspect.getmodule(caller)
        module_name = module.__name__ if module is not None else ""
        func_name = f"{module_name}.{qualname}" if module_name else qualname
        record = {
            "message": str(err),
            "file": f"{code.co_filename}:{caller.f_lineno}",
            "func": func_name,
        }
    finally:
        del frame, caller

    logger.error("error: %s", json.dumps(record))
    return err