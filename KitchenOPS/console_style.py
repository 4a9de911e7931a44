# kitchenops/console_style.py
RESET = "\033[0m"


def bold(text: str) -> str:
    return f"\033[1m{text}{RESET}"


def cyan(text: str) -> str:
    return f"\033[96m{text}{RESET}"


def green(text: str) -> str:
    return f"\033[92m{text}{RESET}"


def red(text: str) -> str:
    return f"\033[91m{text}{RESET}"


def yellow(text: str) -> str:
    return f"\033[93m{text}{RESET}"
