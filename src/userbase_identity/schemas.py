"""Identity schemas and data structures.

These are simple data classes used for transferring identity
data between components.
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class TokenPayload:
    """Decoded bearer token claims.

    Attributes
    ----------
    subject
        The id of the user the token was issued to
    issued_at
        When the token was minted
    expires_at
        When the token stops being accepted
    """

    subject: UUID
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) >= self.expires_at
