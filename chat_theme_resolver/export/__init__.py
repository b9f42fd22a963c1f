from .json_export import (
    ThemeRequestError,
    compute_chat_theme,
    decode_request,
    export_json,
    load_request,
    theme_to_dict,
)
from .report import generate_theme_report, print_theme

__all__ = [
    "ThemeRequestError",
    "compute_chat_theme",
    "decode_request",
    "export_json",
    "load_request",
    "theme_to_dict",
    "generate_theme_report",
    "print_theme",
]
