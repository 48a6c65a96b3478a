# cli/menu_helpers.py

from enum import Enum

from core.errors import RosterError
from core.response import Response


def display_response_failure(response: Response) -> None:
    """
    Displays a formatted error message based on a failed `Response`.

    Notes:
        - Does nothing if the response was successful.
        - Enum error codes are printed by name; string errors are printed as-is.
    """
    if response.success:
        return

    error_label = (
        response.error.name if isinstance(response.error, Enum) else str(response.error)
    )

    print(f"\n[ERROR: {error_label}] {response.detail}")


def display_error(error: RosterError) -> None:
    error_label = error.error_code.name if error.error_code else type(error).__name__

    print(f"\n[ERROR: {error_label}] 程序执行过程中发生错误: {error.message}")


def prompt_exit(prompt: str) -> None:
    try:
        input(f"\n{prompt}")
    except EOFError:
        # stdin closed, nothing to wait for
        print()
