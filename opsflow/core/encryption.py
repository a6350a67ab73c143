"""Field-level encryption for stored credential passwords (Fernet)."""

from __future__ import annotations

import base64
import logging

from cryptography.fernet import Fernet, InvalidToken, MultiFernet
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

from opsflow.core.config import settings
from opsflow.core.errors import PersistenceError

logger = logging.getLogger("opsflow.encryption")

_DEV_SALT = b"opsflow_credentials_v1"


def _derive_key(secret: str) -> bytes:
    kdf = PBKDF2HMAC(algorithm=hashes.SHA256(), length=32, salt=_DEV_SALT, iterations=100_000)
    return base64.urlsafe_b64encode(kdf.derive(secret.encode()))


class FieldEncryptor:
    def __init__(self, keys: str = "", secret: str = "") -> None:
        key_list = [k.strip() for k in keys.split(",") if k.strip()]
        if not key_list:
            logger.warning("ENCRYPTION_KEY not set, deriving credential key from SECRET_KEY")
            self._fernet = Fernet(_derive_key(secret))
        elif len(key_list) == 1:
            self._fernet = Fernet(key_list[0].encode())
        else:
            # First key encrypts, any key decrypts
            self._fernet = MultiFernet([Fernet(k.encode()) for k in key_list])

    def encrypt(self, plaintext: str) -> str:
        return self._fernet.encrypt(plaintext.encode()).decode()

    def decrypt(self, token: str) -> str:
        try:
            return self._fernet.decrypt(token.encode()).decode()
        except InvalidToken as exc:
            logger.error("Stored credential could not be decrypted with the configured key(s)")
            raise PersistenceError("Stored credential could not be decrypted") from exc


_encryptor: FieldEncryptor | None = None


def get_encryptor() -> FieldEncryptor:
    global _encryptor
    if _encryptor is None:
        _encryptor = FieldEncryptor(settings.ENCRYPTION_KEY, settings.SECRET_KEY)
    return _encryptor
