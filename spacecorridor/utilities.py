"""Small numeric and path helpers."""

import math


def positive_fmod(a, b):
    """Return the remainder of a / b, always between 0 and |b|."""
    r = math.fmod(a, b)
    return r if r >= 0.0 else r + abs(b)


def concat_paths(path_1, path_2):
    """Join two path fragments with a slash."""
    return f"{path_1}/{path_2}"


def clamp(x, low, high):
    """Limit x to the range [low, high]."""
    return max(low, min(high, x))