import secrets
import string

# URL-safe alphabet: letters, digits, "_" and "-"
ALPHABET = string.ascii_letters + string.digits + "_-"
SLUG_LENGTH = 8
SUFFIX_LENGTH = 4


def generate_slug(length: int = SLUG_LENGTH) -> str:
    """Generate a random URL-safe identifier of the given length."""
    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def suffix_slug(custom_slug: str) -> str:
    """Derive a fallback candidate from a taken custom slug, e.g. ``promo-x_9A``."""
    return f"{custom_slug}-{generate_slug(SUFFIX_LENGTH)}"
