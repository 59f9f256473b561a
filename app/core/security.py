# Standard library imports
from typing import Optional

# External package imports
import bcrypt

# Local application imports
from .config import get_settings


def hash_password(plain_password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a plain password using bcrypt
    
    Args:
        plain_password: The plain text password to hash
        rounds: bcrypt cost factor (defaults to BCRYPT_ROUNDS)
        
    Returns:
        Hashed password string
    """
    if rounds is None:
        rounds = get_settings().bcrypt_rounds
    salt = bcrypt.gensalt(rounds=rounds)
    hashed = bcrypt.hashpw(plain_password.encode("utf-8"), salt)
    return hashed.decode("utf-8")

