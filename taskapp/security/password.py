import base64
import hashlib
import hmac
import secrets

# Format stocké : "pbkdf2_sha256$<iterations>$<salt b64>$<hash b64>"
_ALGO = "pbkdf2_sha256"
_ITERATIONS = 260_000


def _b64(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def hash_password(password: str, *, iterations: int = _ITERATIONS) -> str:
    """Hash salé PBKDF2-SHA256 d'un mot de passe."""
    salt = secrets.token_bytes(16)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, iterations)
    return f"{_ALGO}${iterations}${_b64(salt)}${_b64(digest)}"


def verify_password(password: str, hashed: str) -> bool:
    """Compare en temps constant ; False si le hash stocké est illisible."""
    try:
        algo, iterations, salt_b64, digest_b64 = hashed.split("$")
    except ValueError:
        return False
    if algo != _ALGO:
        return False
    salt = base64.b64decode(salt_b64)
    expected = base64.b64decode(digest_b64)
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, int(iterations))
    return hmac.compare_digest(digest, expected)
