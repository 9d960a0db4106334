"""Password masking for log output."""

MASK = "*****"


def password(s: str) -> str:
    """Mask a credential, keeping at most its first and last character.

    Strings shorter than five characters are fully masked:
        password("pass")      -> "*****"
        password("password")  -> "p*****d"
    """
    if len(s) < 5:
        return MASK  # too short to reveal anything
    return f"{s[0]}{MASK}{s[-1]}"
