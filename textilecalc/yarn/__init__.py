from .display import (
    generate_yarn_display_name,
    get_yarn_category_label,
    get_yarn_short_display,
    parse_yarn_display_name,
)

__all__ = [
    "generate_yarn_display_name",
    "get_yarn_category_label",
    "get_yarn_short_display",
    "parse_yarn_display_name",
]
