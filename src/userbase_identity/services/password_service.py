"""Password hashing service using bcrypt.

Provides secure password hashing and verification with a configurable
work factor and length policy.

bcrypt calls are CPU-bound and blocking; async callers run them in a
worker thread.
"""

import bcrypt

from userbase_identity.exceptions import WeakPasswordError

# Fixed input for the dummy hash used to equalize login failure timing
_DUMMY_PASSWORD = b"userbase-timing-equalizer"  # NOQA: S105


class PasswordHashingService:
    """Service for secure password hashing and verification.

    Uses bcrypt for password hashing with configurable work factor.
    Also provides password length validation.

    Examples
    --------
    >>> service = PasswordHashingService()
    >>> hash = service.hash("my_secure_password")
    >>> service.verify("my_secure_password", hash)
    True
    >>> service.verify("wrong_password", hash)
    False
    """

    DEFAULT_ROUNDS = 12
    # bcrypt 4.x silently truncates at 72 bytes, 5.x rejects longer input
    MAX_BYTES = 72

    def __init__(self, rounds: int = DEFAULT_ROUNDS, min_length: int = 1):
        """Initialize the password hashing service.

        Parameters
        ----------
        rounds
            The bcrypt work factor (log2 of iterations). Default is 12,
            which is a good balance of security and performance.
            Higher values are more secure but slower.
        min_length
            Minimum number of characters a new password must have.
        """
        if min_length < 1:
            msg = "min_length must be at least 1"
            raise ValueError(msg)

        self._rounds = rounds
        self._min_length = min_length
        self._dummy_hash = bcrypt.hashpw(
            _DUMMY_PASSWORD,
            bcrypt.gensalt(rounds=rounds),
        )

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """Hash a plaintext password.

        Parameters
        ----------
        password
            The plaintext password to hash

        Returns
        -------
        The bcrypt hash (salt embedded) as a string

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        self.validate_strength(password)
        salt = bcrypt.gensalt(rounds=self._rounds)
        hashed = bcrypt.hashpw(password.encode("utf-8"), salt)
        return hashed.decode("utf-8")

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash.

        The comparison is bcrypt's own re-derive-and-compare, never a
        string comparison. Passwords over :attr:`MAX_BYTES` never match,
        whatever the installed bcrypt does with them.

        Parameters
        ----------
        password
            The plaintext password to check
        password_hash
            The bcrypt hash to verify against

        Returns
        -------
        True if password matches, False otherwise
        """
        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_BYTES:
            return False

        try:
            return bcrypt.checkpw(encoded, password_hash.encode("utf-8"))
        except (ValueError, TypeError):
            # Invalid hash format
            return False

    def verify_dummy(self, password: str) -> None:
        """Spend the same work as :meth:`verify` without a real hash.

        Called on the unknown-email login path so it takes as long as the
        wrong-password path.
        """
        encoded = password.encode("utf-8")
        if len(encoded) > self.MAX_BYTES:
            return
        bcrypt.checkpw(encoded, self._dummy_hash)

    def validate_strength(self, password: str) -> None:
        """Validate that a password meets the configured requirements.

        Current requirements:
        - Not empty, at least ``min_length`` characters
        - At most 72 bytes once UTF-8 encoded

        Raises
        ------
        WeakPasswordError
            If password doesn't meet requirements
        """
        if not password:
            msg = "Password cannot be empty"
            raise WeakPasswordError(msg)

        if len(password) < self._min_length:
            msg = f"Password must be at least {self._min_length} characters"
            raise WeakPasswordError(msg)

        if len(password.encode("utf-8")) > self.MAX_BYTES:
            msg = f"Password cannot exceed {self.MAX_BYTES} bytes"
            raise WeakPasswordError(msg)
