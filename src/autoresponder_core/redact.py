def redact_secret(secret: str) -> str:
    """
    Masks an API key for logging: ***<last4chars>
    Example: fd_live_abcdef1234 -> ***1234

    Keys of four characters or fewer are fully masked.
    """
    if not secret:
        return ""

    value = secret.strip()
    if len(value) <= 4:
        return "***"
    return f"***{value[-4:]}"


def redact_email(email: str) -> str:
    """
    Keeps the first character of the local part and the domain.
    Example: jane.doe@example.com -> j***@example.com
    """
    if not email:
        return ""

    local, sep, domain = email.strip().partition("@")
    if not sep:
        return "***"
    head = local[:1]
    return f"{head}***@{domain}"
