from inspect import getfile, getsourcelines
from os.path import basename
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    DEPTH_LINE,
    MAX_CONTENT_LENGTH,
    call_depth_var,
)


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    lineno = getsourcelines(func)[1]
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def enter_call() -> None:
    call_depth_var.set(call_depth_var.get() + 1)


def reset_call_depth() -> None:
    call_depth_var.set(max(call_depth_var.get() - 1, 0))


def fetch_layer_depth() -> str:
    return DEPTH_LINE * (call_depth_var.get() - 1)


def truncate_content(data: Any) -> Any:
    data_str = str(data)
    if len(data_str) <= MAX_CONTENT_LENGTH:
        return data
    return f'{data_str[:MAX_CONTENT_LENGTH]}...(+{len(data_str) - MAX_CONTENT_LENGTH} chars)'
