"""CLI helper utilities."""

from pixbuild.cli.helpers.output import (
    ConsoleStageObserver,
    print_error_message,
    print_info_message,
    print_list_item,
    print_next_steps,
    print_success_message,
    print_warning_message,
)


__all__ = [
    "ConsoleStageObserver",
    "print_error_message",
    "print_info_message",
    "print_list_item",
    "print_next_steps",
    "print_success_message",
    "print_warning_message",
]
