import re

# Each pattern is (prefix)(secret); the prefix survives redaction
SECRET_PATTERNS = [
    r"(Bearer\s+)([a-zA-Z0-9\-\._~+/=]+)",
    r"(Private-Token:\s*)([a-zA-Z0-9\-\._~+/=]+)",
    r"(X-Gitlab-Token:\s*)([a-zA-Z0-9\-\._~+/=]+)",
    r"(glpat-)([a-zA-Z0-9\-_]{20,})",
]


def redact_text(text: str) -> str:
    """Mask GitLab tokens in a webhook body before it is logged."""
    if not text:
        return text

    redacted_text = text
    for pattern in SECRET_PATTERNS:
        redacted_text = re.sub(pattern, r"\1[REDACTED]", redacted_text, flags=re.IGNORECASE)
    return redacted_text
