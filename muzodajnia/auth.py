"""User accounts kept in a plain text database of hashed passwords."""

from __future__ import annotations

import hashlib
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from muzodajnia.utils import get_hidden_input, split_sentence

DEFAULT_DB_PATH = Path("db") / "users.db"

_FIRST_PROMPT = "Password: "
_CONFIRM_PROMPT = "Confirm password: "


class UserRole(Enum):
    FREE = "free"
    PREMIUM = "premium"
    ADMIN = "admin"


@dataclass(eq=False)
class User:
    """An account; two users are equal when their usernames are."""

    username: str
    password: str = field(default="", repr=False)
    role: UserRole = UserRole.FREE

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self.username == other.username

    def __hash__(self) -> int:
        return hash(self.username)


class UserExistsError(Exception):
    """Raised when registering a username that is already taken."""


def hash_password(password: str) -> str:
    """Return the lower-case hex SHA-256 digest of the UTF-8 password."""
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def role_from_string(role_string: str) -> UserRole:
    """Map a stored role word to a role; anything unrecognised is FREE."""
    try:
        return UserRole(role_string)
    except ValueError:
        return UserRole.FREE


class Auth:
    """Registration and login against the users database."""

    def __init__(self, db_path: str | Path = DEFAULT_DB_PATH) -> None:
        self.db_path = Path(db_path)
        self.logged_in = False
        self.user: User | None = None

    def ensure_db(self) -> None:
        """Create the database file and its directory if they are missing."""
        if self.db_path.exists():
            return
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        self.db_path.touch()
        print(f"Database created at: {self.db_path}")

    def users(self) -> list[User]:
        """Read every account from the database; a missing file has none."""
        try:
            text = self.db_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return []
        result = []
        for line in text.splitlines():
            words = split_sentence(line)
            if len(words) < 2:
                continue
            role = role_from_string(words[2]) if len(words) > 2 else UserRole.FREE
            result.append(User(words[0], words[1], role))
        return result

    def log_in(self, username: str, password: str) -> bool:
        """Check the credentials; on success remember the user as logged in."""
        self.ensure_db()
        digest = hash_password(password)
        for user in self.users():
            if user.username == username and user.password == digest:
                self.logged_in = True
                self.user = user
                return True
        return False

    def register(self, username: str, password: str) -> User:
        """Add a new account with the free role and return it."""
        self.ensure_db()
        if any(user.username == username for user in self.users()):
            raise UserExistsError(username)
        user = User(username, hash_password(password), UserRole.FREE)
        with self.db_path.open("a", encoding="utf-8") as db:
            db.write(f"{user.username} {user.password} Free\n")
        return user

    def interactive_log_in(self, username: str) -> bool:
        """Prompt for the password and log in, reporting the outcome."""
        entered = get_hidden_input(_FIRST_PROMPT)
        if self.log_in(username, entered):
            print("Successfully logged in!")
            return True
        print("Wrong username or password.")
        return False

    def interactive_register(self, username: str) -> bool:
        """Prompt twice for the password and register, reporting the outcome."""
        entered = get_hidden_input(_FIRST_PROMPT)
        confirmation = get_hidden_input(_CONFIRM_PROMPT)
        if entered != confirmation:
            print("Password must be the same.")
            return False
        try:
            self.register(username, entered)
        except UserExistsError:
            print("User already exists.")
            return False
        print("User successfully created! Now you can log in using 'login'.")
        return True