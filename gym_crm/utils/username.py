import logging
from typing import Callable, Optional

from gym_crm.config import config
from gym_crm.errors.profile_errors import UsernameGenerationError

logger = logging.getLogger(__name__)


def base_username(first_name: str, last_name: str) -> str:
    return f"{first_name.strip()}.{last_name.strip()}"


def generate_username(
    first_name: str,
    last_name: str,
    exists: Callable[[str], bool],
    max_attempts: Optional[int] = None,
) -> str:
    """
    Builds "First.Last" and appends a serial number (First.Last1, First.Last2, ...)
    until `exists` reports a free candidate.

    Raises:
        UsernameGenerationError: no free candidate within `max_attempts` attempts
    """
    max_attempts = max_attempts or config.USERNAME_MAX_ATTEMPTS
    base = base_username(first_name, last_name)

    for serial in range(max_attempts):
        candidate = base if serial == 0 else f"{base}{serial}"
        if not exists(candidate):
            return candidate
        logger.debug(f"Username {candidate} is taken")

    logger.error(f"Could not generate a free username for {base} in {max_attempts} attempts")
    raise UsernameGenerationError(f"No free username for {base}")
