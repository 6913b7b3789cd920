import unittest
from datetime import datetime, timedelta, timezone
from unittest.mock import patch

import jwt
from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from app.config import get_settings
from app.core import passwords, security
from app.core.errors import InvalidCredentials, InvalidToken, Unauthorized
from app.core.passwords import hash_password, verify_password
from app.core.security import authenticate_request, decode_token, issue_token
from app.database import build_engine, init_schema
from app.models.user import User
from app.schemas.auth import LoginRequest, RegisterRequest
from app.services import auth_service
from app.services.auth_service import login, register_user


class PasswordHashingTest(unittest.TestCase):
    def test_hash_is_salted_and_verifiable(self):
        first = hash_password("pw1", rounds=1000)
        second = hash_password("pw1", rounds=1000)

        self.assertNotEqual(first, second)
        self.assertTrue(first.startswith("pbkdf2_sha256$1000$"))
        self.assertTrue(verify_password("pw1", first))
        self.assertTrue(verify_password("pw1", second))

    def test_wrong_password_is_rejected(self):
        encoded = hash_password("pw1", rounds=1000)
        self.assertFalse(verify_password("pw2", encoded))

    def test_malformed_hash_is_rejected(self):
        self.assertFalse(verify_password("pw1", "not-a-hash"))
        self.assertFalse(verify_password("pw1", "md5$10$salt$abc"))


class TokenTest(unittest.TestCase):
    def test_issued_token_round_trips_identity(self):
        identity = decode_token(issue_token(42))
        self.assertEqual(identity.user_id, 42)
        self.assertEqual(identity.expires_at - identity.issued_at, timedelta(hours=1))

    def test_token_is_valid_until_expiry(self):
        issued = datetime.now(timezone.utc) - timedelta(minutes=59)
        self.assertEqual(decode_token(issue_token(7, now=issued)).user_id, 7)

    def test_expired_token_is_invalid(self):
        issued = datetime.now(timezone.utc) - timedelta(hours=1, seconds=5)
        with self.assertRaises(InvalidToken):
            decode_token(issue_token(7, now=issued))

    def test_token_signed_with_another_secret_is_invalid(self):
        now = datetime.now(timezone.utc)
        forged = jwt.encode(
            {"id": "7", "iat": now, "exp": now + timedelta(hours=1)},
            "some-other-secret",
            algorithm="HS256",
        )
        with self.assertRaises(InvalidToken):
            decode_token(forged)

    def test_token_without_identity_claim_is_invalid(self):
        now = datetime.now(timezone.utc)
        token = jwt.encode(
            {"iat": now, "exp": now + timedelta(hours=1)},
            security._signing_secret(),
            algorithm="HS256",
        )
        with self.assertRaises(InvalidToken):
            decode_token(token)

    def test_garbage_token_is_invalid(self):
        with self.assertRaises(InvalidToken):
            decode_token("abc.def.ghi")


class AuthenticateRequestTest(unittest.TestCase):
    def test_missing_header_is_unauthorized(self):
        with self.assertRaises(Unauthorized):
            authenticate_request(None)
        with self.assertRaises(Unauthorized):
            authenticate_request("   ")

    def test_raw_token_without_bearer_prefix_is_invalid(self):
        with self.assertRaises(InvalidToken):
            authenticate_request(issue_token(3))

    def test_bearer_token_is_accepted(self):
        identity = authenticate_request("Bearer {}".format(issue_token(3)))
        self.assertEqual(identity.user_id, 3)

    def test_bearer_scheme_is_case_insensitive(self):
        identity = authenticate_request("bearer {}".format(issue_token(3)))
        self.assertEqual(identity.user_id, 3)


class AuthServiceTest(unittest.TestCase):
    def setUp(self):
        self.engine = build_engine("sqlite:///:memory:")
        init_schema(self.engine)
        self.db = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)()

    def tearDown(self):
        self.db.close()
        self.engine.dispose()

    def test_register_stores_hash_not_password(self):
        register_user(self.db, RegisterRequest(name="Alice", email="a@x.com", password="pw1"))

        user = self.db.execute(select(User).where(User.email == "a@x.com")).scalars().one()
        self.assertEqual(user.name, "Alice")
        self.assertNotEqual(user.password_hash, "pw1")
        self.assertTrue(verify_password("pw1", user.password_hash))

    def test_login_returns_verifiable_token(self):
        user = register_user(self.db, RegisterRequest(name="Alice", email="a@x.com", password="pw1"))

        token = login(self.db, LoginRequest(email="a@x.com", password="pw1"))

        self.assertEqual(decode_token(token).user_id, user.id)

    def test_wrong_password_and_unknown_email_fail_the_same_way(self):
        register_user(self.db, RegisterRequest(name="Alice", email="a@x.com", password="pw1"))

        with self.assertRaises(InvalidCredentials) as wrong_password:
            login(self.db, LoginRequest(email="a@x.com", password="nope"))
        with self.assertRaises(InvalidCredentials) as unknown_email:
            login(self.db, LoginRequest(email="b@x.com", password="pw1"))

        self.assertEqual(wrong_password.exception.detail, unknown_email.exception.detail)
        self.assertEqual(wrong_password.exception.status_code, 400)

    def test_unknown_email_runs_the_same_hash_work_as_wrong_password(self):
        register_user(self.db, RegisterRequest(name="Alice", email="a@x.com", password="pw1"))
        auth_service._dummy_password_hash()

        with patch.object(passwords, "_pbkdf2", wraps=passwords._pbkdf2) as hasher:
            with self.assertRaises(InvalidCredentials):
                login(self.db, LoginRequest(email="a@x.com", password="nope"))
            wrong_password_calls = hasher.call_count
            hasher.reset_mock()

            with self.assertRaises(InvalidCredentials):
                login(self.db, LoginRequest(email="b@x.com", password="nope"))
            unknown_email_calls = hasher.call_count

        self.assertEqual(wrong_password_calls, 1)
        self.assertEqual(unknown_email_calls, 1)
        self.assertEqual(hasher.call_args.args[2], get_settings().PASSWORD_PBKDF2_ROUNDS)

    def test_failed_login_does_not_log_raw_email(self):
        with self.assertLogs("app.services.auth_service", level="INFO") as captured:
            with self.assertRaises(InvalidCredentials):
                login(self.db, LoginRequest(email="secret@x.com", password="pw1"))

        self.assertNotIn("secret@x.com", "\n".join(captured.output))


if __name__ == "__main__":
    unittest.main()
