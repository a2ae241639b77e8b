from swatchbook.core import config as c


def _clamp01(v: float) -> float:
    if v != v:
        return 0.0
    return max(c.OPACITY_MIN, min(c.OPACITY_MAX, v))


def _clamp255(v: float) -> float:
    if v != v:
        return 0.0
    return max(0.0, min(c.RGB_MAX, v))
