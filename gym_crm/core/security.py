import logging
import re
from typing import Optional

from passlib.context import CryptContext

from gym_crm.config import config

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify(password: Optional[str]) -> bool:
    """
    Checks a plaintext password against the password policy:
    minimum length, at least one letter and one digit, no whitespace.
    """
    if not password or len(password) < config.PASSWORD_MIN_LENGTH:
        return False
    if re.search(r"\s", password):
        return False
    return bool(re.search(r"[A-Za-z]", password)) and bool(re.search(r"[0-9]", password))


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def password_matches(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not plain_password or not hashed_password:
        return False
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        # not a hash passlib recognises
        logger.warning("Stored password hash has an unknown format")
        return False
