import re

def is_valid_period(s: str) -> bool:
    return bool(re.fullmatch(r"[0-9A-Za-z_-]{1,64}", s or ""))
