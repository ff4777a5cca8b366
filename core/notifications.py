"""User-visible notification sink used by the core.

A notifier is any callable taking a message string. The GUI routes it to
the status bar; headless callers print.
"""


def print_notifier(message: str):
    """Default notifier: print the message."""
    print(f"NOTICE: {message}")
