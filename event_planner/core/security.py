from datetime import datetime, timedelta, timezone
from jose import jwt
from passlib.context import CryptContext
from event_planner.core.config import settings

# ── Bcrypt Password Hashing ───────────────────────────────────────────
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Verified against when the admin is unknown, so response time doesn't
# reveal which emails have accounts.
_DUMMY_HASH = pwd_context.hash("event-planner-dummy-password")


def hash_password(plain: str) -> str:
    return pwd_context.hash(plain)


def verify_password(plain: str, hashed: str | None) -> bool:
    """
    bcrypt comparison that also burns a verify on missing or malformed
    hashes, so every failure path costs the same.
    """
    if not hashed or len(hashed) < 59:
        pwd_context.verify(plain, _DUMMY_HASH)
        return False
    try:
        return pwd_context.verify(plain, hashed)
    except ValueError:
        pwd_context.verify(plain, _DUMMY_HASH)
        return False


# ── JWT Token ─────────────────────────────────────────────────────────
def create_access_token(admin_id: int, email: str) -> str:
    """
    Payload:
      sub  : admin ID
      email: for frontend display
      type : "access"; other token types are rejected by the admin guard
      iat / exp
    """
    now = datetime.now(timezone.utc)
    payload = {
        "sub":   str(admin_id),
        "email": email,
        "type":  "access",
        "iat":   now,
        "exp":   now + timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    }
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def decode_access_token(token: str) -> dict:
    """Raises jose.JWTError on a bad signature or an expired token."""
    return jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
