"""
Verification code generator for group invitations.

Draws 8 bytes from the OS CSPRNG, reads them as an unsigned little-endian
64-bit integer and reduces modulo 10000. Values below 1000 are shifted up by
1000, so the result is always four digits. The shift doubles the weight of
1000..1999; callers must not assume a uniform distribution.
"""

import logging
import secrets

from group_invitations.domain.errors import server_error
from group_invitations.libs.result import Result, Return

logger = logging.getLogger(__name__)

CODE_MODULUS = 10000
CODE_FLOOR = 1000


def generate_verification_code() -> Result[str]:
    try:
        raw = secrets.token_bytes(8)
    except OSError as exc:
        logger.error("Random source failed: %s", exc)
        return Return.err(server_error(exc))

    code = int.from_bytes(raw, "little", signed=False) % CODE_MODULUS
    if code < CODE_FLOOR:
        code = CODE_FLOOR + code
    return Return.ok(str(code))
