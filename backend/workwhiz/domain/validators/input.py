"""Input confirmation check."""


def validate_input(first, second) -> bool:
    """Compare two user inputs, ignoring surrounding whitespace.

    The comparison is case-sensitive. Used for confirmation flows such as
    "repeat your password".

    Examples:
        >>> validate_input("  Hello, World!  ", "Hello, World!")
        True
        >>> validate_input("Hello, World!", "hello, world!")
        False
    """
    if not isinstance(first, str) or not isinstance(second, str):
        return False
    return first.strip() == second.strip()
