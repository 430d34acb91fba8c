"""
URL builders for the upstream endpoints.

Plain concatenation; the base URL is not validated here.
"""

TODO_PATH = "/todos/1"
CATS_PATH = "/facts/random"


def todo_url(base_url: str) -> str:
    return f"{base_url}{TODO_PATH}"


def cats_url(base_url: str) -> str:
    return f"{base_url}{CATS_PATH}"
