"""Session store: authenticated user and token mirrored to storage."""

import json
import logging

from funfood.domain.entities.user import User
from funfood.domain.exceptions import PersistenceFailure
from funfood.domain.repositories.storage import KeyValueStorage

logger = logging.getLogger("funfood.session")

TOKEN_KEY = "authToken"
USER_KEY = "user"


class SessionStore:
    """Authentication state backed by a key-value storage.

    Storage is always written before memory, so the in-memory session is
    never authenticated unless the credential is durably stored. Logout
    likewise keeps the session if the stored credential cannot be cleared.
    """

    def __init__(self, storage: KeyValueStorage):
        self.storage = storage
        self.user: User | None = None
        self.token: str | None = None
        self._restoring = 0

    @property
    def is_authenticated(self) -> bool:
        """Both user and token are present."""
        return self.user is not None and self.token is not None

    @property
    def is_loading(self) -> bool:
        """A restore is in flight."""
        return self._restoring > 0

    def _apply(self, user: User | None, token: str | None) -> None:
        self.user = user
        self.token = token

    async def _persist(self, user: User, token: str) -> None:
        await self.storage.set(TOKEN_KEY, token)
        await self.storage.set(USER_KEY, json.dumps(user.to_dict()))

    async def _undo_partial_write(self) -> None:
        """Put storage back in line with the in-memory session."""
        try:
            if self.is_authenticated:
                await self._persist(self.user, self.token)
            else:
                await self.storage.clear()
        except Exception as e:
            logger.error(f"Could not restore stored session after failed write: {e}")

    async def set_user(self, user: User, token: str) -> None:
        """Persist and activate a session after login or registration.

        Raises:
            PersistenceFailure: If the credential could not be stored; the
                in-memory session is left unchanged
        """
        try:
            await self._persist(user, token)
        except Exception as e:
            logger.error(f"Failed to persist session for user {user.id}: {e}")
            await self._undo_partial_write()
            if isinstance(e, PersistenceFailure):
                raise
            raise PersistenceFailure(f"Failed to persist session: {e}") from e

        self._apply(user, token)
        logger.info(f"Session started for user {user.id}")

    async def logout(self) -> None:
        """Clear the stored credential, then the in-memory session.

        Raises:
            PersistenceFailure: If storage could not be cleared; the user
                stays logged in
        """
        try:
            await self.storage.clear()
        except PersistenceFailure:
            logger.error("Failed to clear stored session, keeping user logged in")
            raise
        except Exception as e:
            logger.error(f"Failed to clear stored session, keeping user logged in: {e}")
            raise PersistenceFailure(f"Failed to clear session: {e}") from e

        self._apply(None, None)
        logger.info("Session cleared")

    async def _read_session(self) -> tuple[User | None, str | None]:
        try:
            token = await self.storage.get(TOKEN_KEY)
            raw_user = await self.storage.get(USER_KEY)
        except PersistenceFailure:
            raise
        except Exception as e:
            raise PersistenceFailure(f"Failed to read session: {e}") from e

        if not raw_user:
            return None, token

        try:
            return User.from_dict(json.loads(raw_user)), token
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Ignoring unreadable stored user: {e}")
            return None, token

    async def restore_session(self) -> bool:
        """Load the session from storage.

        The session becomes authenticated when both token and user are
        stored, anonymous otherwise. ``is_loading`` is true until the last
        concurrent restore finishes, including when reading fails.

        Returns:
            True if a session was restored

        Raises:
            PersistenceFailure: If storage could not be read
        """
        self._restoring += 1
        try:
            user, token = await self._read_session()
            if user is not None and token:
                self._apply(user, token)
                logger.info(f"Restored session for user {user.id}")
                return True

            self._apply(None, None)
            logger.debug("No stored session")
            return False
        finally:
            self._restoring -= 1
