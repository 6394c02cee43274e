def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def non_negative(value) -> float:
    # NaN and None collapse to 0 so callers never see them downstream.
    try:
        v = float(value)
    except (TypeError, ValueError):
        return 0.0
    if v != v or v < 0:
        return 0.0
    return v


def round_or_none(v, ndigits=2):
    if v is None:
        return None
    return round(v, ndigits)
