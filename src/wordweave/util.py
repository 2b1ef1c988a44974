"""Utility functions for Word Weaver."""


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"


def int_comma(n: int) -> str:
    """Format an integer with commas as thousands separators.

    Args:
        n: The integer to format.

    Returns:
        A string representation of the integer with commas.
    """
    return f"{n:,}"


def ladder_str(words: list[str]) -> str:
    """Format a word ladder for printing, one tab-indented word per line.

    Args:
        words: The words of the ladder, in order.

    Returns:
        The formatted ladder, without a trailing newline.
    """
    return "\n".join(f"\t{word}" for word in words)
