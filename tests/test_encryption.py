from __future__ import annotations

import unittest

from cryptography.fernet import Fernet

from opsflow.core.encryption import FieldEncryptor
from opsflow.core.errors import PersistenceError


class FieldEncryptorTests(unittest.TestCase):
    def test_round_trip_with_configured_key(self) -> None:
        encryptor = FieldEncryptor(Fernet.generate_key().decode())
        token = encryptor.encrypt("hunter2")
        self.assertNotIn("hunter2", token)
        self.assertEqual(encryptor.decrypt(token), "hunter2")

    def test_key_derived_from_secret_when_unset(self) -> None:
        first = FieldEncryptor("", "dev-secret")
        second = FieldEncryptor("", "dev-secret")
        self.assertEqual(second.decrypt(first.encrypt("pw")), "pw")

    def test_rotation_keeps_old_tokens_readable(self) -> None:
        old_key = Fernet.generate_key().decode()
        new_key = Fernet.generate_key().decode()
        token = FieldEncryptor(old_key).encrypt("legacy")
        rotated = FieldEncryptor(f"{new_key},{old_key}")
        self.assertEqual(rotated.decrypt(token), "legacy")

    def test_wrong_key_raises_persistence_error(self) -> None:
        token = FieldEncryptor(Fernet.generate_key().decode()).encrypt("x")
        with self.assertRaises(PersistenceError):
            FieldEncryptor(Fernet.generate_key().decode()).decrypt(token)


if __name__ == "__main__":
    unittest.main()
