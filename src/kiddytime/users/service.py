from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from werkzeug.security import check_password_hash, generate_password_hash

from ..common.datetime_utils import utc_now_iso
from ..common.validators import require_min_length
from ..core.constants import ADMIN_USERNAME, MIN_PASSWORD_LENGTH
from ..core.exceptions import AuthenticationError, ValidationError
from .model import User
from .repository import UserRepository

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionUser:
    """What we store into Flask session after login."""

    user_id: str
    username: str


class AuthService:
    """Use case: single-admin password setup and login."""

    def __init__(self, users: UserRepository):
        self._users = users

    def has_password(self) -> bool:
        return self._users.count() > 0

    def setup(self, password: str | None) -> SessionUser:
        """Create the admin account. Only the very first call succeeds."""
        require_min_length(password, "Le mot de passe", MIN_PASSWORD_LENGTH)

        if self.has_password():
            log.warning("Password setup refused: an admin already exists")
            raise ValidationError("Un utilisateur existe déjà")

        user = User(
            id=uuid.uuid4().hex,
            username=ADMIN_USERNAME,
            password_hash=generate_password_hash(password),
            created_at=utc_now_iso(),
        )
        self._users.create(user)
        log.info("Admin account created")
        return SessionUser(user_id=user.id, username=user.username)

    def authenticate(self, password: str | None) -> SessionUser:
        if not password:
            raise ValidationError("Mot de passe requis")

        users = self._users.list_all()
        if not users:
            raise ValidationError("Aucun utilisateur trouvé")
        user = users[0]

        try:
            ok = check_password_hash(user.password_hash, password)
        except ValueError:
            # e.g. corrupted or foreign hash formats
            ok = False

        if not ok:
            log.info("Login failed for %s", user.username)
            raise AuthenticationError("Mot de passe incorrect")

        return SessionUser(user_id=user.id, username=user.username)
