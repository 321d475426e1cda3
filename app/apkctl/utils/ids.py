"""Short random identifiers for file name disambiguation."""

import secrets

# URL-safe alphabet, also safe in file names on every common filesystem
URL_SAFE_ALPHABET = "useandom-26T198340PX75pxJACKVERYMINDBUSHWOLF_GQZbfghjklqvwyzrict"


def short_id(length: int = 5) -> str:
    """Generate a random identifier drawn from the URL-safe alphabet.

    Args:
        length: Number of characters to generate.

    Returns:
        Random string of the requested length.

    Raises:
        ValueError: If length is not positive.
    """
    if length <= 0:
        msg = f"Identifier length must be positive, got {length}"
        raise ValueError(msg)
    return "".join(secrets.choice(URL_SAFE_ALPHABET) for _ in range(length))
