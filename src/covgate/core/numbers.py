from __future__ import annotations


def parse_float(text: str) -> float:
    """Parse a decimal number the way a strict float parser would.

    Unlike :func:`float`, surrounding whitespace and ``_`` digit separators are
    rejected with :class:`ValueError`.
    """
    if text != text.strip():
        msg = f"surrounding whitespace in {text!r}"
        raise ValueError(msg)
    if "_" in text:
        msg = f"digit separator in {text!r}"
        raise ValueError(msg)
    return float(text)


__all__ = ["parse_float"]
