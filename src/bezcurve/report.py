from functools import wraps
import logging
import time

__report_indent_level = 0


def report(fn):
    """
    Log duration of every call of `fn` at the debug level.
    Nested reported calls are indented.
    """
    @wraps(fn)
    def do_report(*args, **kwargs):
        global __report_indent_level
        __report_indent_level += 1
        init_time = time.perf_counter()
        try:
            result = fn(*args, **kwargs)
        finally:
            duration = time.perf_counter() - init_time
            __report_indent_level -= 1
        indent = (__report_indent_level * 2) * " "
        logging.debug(f"{indent}DONE {fn.__module__}.{fn.__qualname__} @ {duration:.6f} s")
        return result
    return do_report
