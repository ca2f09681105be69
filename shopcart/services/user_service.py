# shopcart/services/user_service.py
import logging
import secrets
from datetime import datetime, timezone

from sqlmodel import Session

from shopcart.models.user import UserProfile
from shopcart.repositories.user_repo import UserRepository
from shopcart.schemas.user import (
    LoginResult,
    RegisterResult,
    UserInfo,
    UserLogin,
    UserRegister,
)

logger = logging.getLogger(__name__)


class UserService:
    """
    Business logic for the single local user.

    Responsibilities:
      - registration of the one profile (a second attempt is a conflict)
      - credential check and session flag
      - expose conflicts as result values, not exceptions
    """

    def __init__(self, repo: UserRepository, principal_id: str):
        self.repo = repo
        self.principal_id = principal_id

    # ----- Profile -----

    def get_profile(self, session: Session) -> UserProfile | None:
        """Return the principal user, or None if nobody registered yet."""
        return self.repo.get_by_id(session, self.principal_id)

    def get_user_info(self, session: Session) -> UserInfo:
        user = self.get_profile(session)
        if user is None:
            return UserInfo()
        return UserInfo(name=user.name, email=user.email, is_logged_in=user.is_logged_in)

    def is_logged_in(self, session: Session) -> bool:
        user = self.get_profile(session)
        return bool(user and user.is_logged_in)

    # ----- Authentication -----

    def register(self, session: Session, payload: UserRegister) -> RegisterResult:
        """
        Create the principal profile and log it in.

        Rules:
          - fails with ALREADY_EXISTS if any profile exists, whatever the
            email/password; the existing row is left untouched
        """
        if self.get_profile(session) is not None:
            logger.info("Registration rejected: a profile already exists")
            return RegisterResult.ALREADY_EXISTS

        user = UserProfile(
            id=self.principal_id,
            name=payload.name,
            email=payload.email,
            password=payload.password,
            is_logged_in=True,
        )
        self.repo.create(session, user)
        logger.info("Registered principal user %s", self.principal_id)
        return RegisterResult.SUCCESS

    def login(self, session: Session, payload: UserLogin) -> LoginResult:
        """
        Check email + password against the stored profile and set the
        logged-in flag on success.
        """
        user = self.get_profile(session)

        if (
            user is None
            or user.email != payload.email
            or not secrets.compare_digest(
                user.password.encode("utf-8"), payload.password.encode("utf-8")
            )
        ):
            logger.info("Login failed for %s", payload.email)
            return LoginResult.INVALID_CREDENTIALS

        self._write_login_flag(session, user, True)
        logger.info("Principal user logged in")
        return LoginResult.SUCCESS

    def logout(self, session: Session) -> None:
        self.set_login_flag(session, False)

    def set_login_flag(self, session: Session, logged_in: bool) -> UserProfile | None:
        """
        Flip the session flag; no-op when there is no profile.
        """
        user = self.get_profile(session)
        if user is None:
            return None
        return self._write_login_flag(session, user, logged_in)

    def wipe(self, session: Session) -> bool:
        """
        Delete the profile (and, through the FK cascade, its addresses).
        """
        user = self.get_profile(session)
        if user is None:
            return False
        self.repo.delete(session, user)
        logger.info("Principal user wiped")
        return True

    # ----- helpers -----

    def _write_login_flag(
        self,
        session: Session,
        user: UserProfile,
        logged_in: bool,
    ) -> UserProfile:
        user.is_logged_in = logged_in
        user.updated_at = datetime.now(timezone.utc)
        return self.repo.update(session, user)
