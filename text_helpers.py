# text_helpers.py
"""Text preprocessing kept in its own module so saved pipelines pickle cleanly."""
import re


def clean_text(s):
    if not isinstance(s, str):
        return ""
    s = s.lower()
    s = re.sub(r"[^a-z0-9\s]", " ", s)
    s = re.sub(r"\s+", " ", s).strip()
    return s
