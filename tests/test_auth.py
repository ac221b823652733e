import pytest

from muzodajnia.auth import (
    Auth,
    User,
    UserExistsError,
    UserRole,
    hash_password,
    role_from_string,
)


@pytest.fixture
def auth(tmp_path):
    return Auth(tmp_path / "db" / "users.db")


def _fake_inputs(monkeypatch, *answers):
    replies = iter(answers)
    monkeypatch.setattr("getpass.getpass", lambda prompt: next(replies))


def test_hash_password_empty_string():
    assert hash_password("") == (
        "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
    )


def test_hash_password_abc():
    assert hash_password("abc") == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_hash_password_shape_and_determinism():
    digest = hash_password("password")
    assert digest == hash_password("password")
    assert len(digest) == 64
    assert digest == digest.lower()
    assert hash_password("secret") != digest or False


@pytest.mark.parametrize(
    "word, role",
    [
        ("free", UserRole.FREE),
        ("premium", UserRole.PREMIUM),
        ("admin", UserRole.ADMIN),
        ("Free", UserRole.FREE),
        ("Admin", UserRole.FREE),
        ("", UserRole.FREE),
    ],
)
def test_role_from_string(word, role):
    assert role_from_string(word) is role


def test_user_equality_by_username():
    assert User("alice", "x", UserRole.ADMIN) == User("alice", "y", UserRole.FREE)
    assert len({User("alice", "x"), User("alice", "y")}) == 1


def test_ensure_db_creates_file(auth, capsys):
    auth.ensure_db()
    assert auth.db_path.is_file()
    assert "Database created at:" in capsys.readouterr().out


def test_ensure_db_keeps_existing_content(auth):
    auth.db_path.parent.mkdir(parents=True)
    auth.db_path.write_text("bob abc admin\n")
    auth.ensure_db()
    assert auth.db_path.read_text() == "bob abc admin\n"


def test_users_missing_file_is_empty(auth):
    assert auth.users() == []


def test_users_reads_roles(auth):
    auth.db_path.parent.mkdir(parents=True)
    auth.db_path.write_text("bob h1 admin\ncarol h2\n\ndave h3 premium\n")
    users = auth.users()
    assert [u.username for u in users] == ["bob", "carol", "dave"]
    assert [u.role for u in users] == [UserRole.ADMIN, UserRole.FREE, UserRole.PREMIUM]
    assert users[0].password == "h1"


def test_register_then_log_in(auth):
    password = "password"
    created = auth.register("alice", password)
    assert created.password == hash_password(password)
    assert auth.log_in("alice", password) is True
    assert auth.logged_in is True
    assert auth.user == User("alice")
    assert auth.user.role is UserRole.FREE


def test_register_writes_line(auth):
    password = "password"
    auth.register("alice", password)
    assert auth.db_path.read_text() == f"alice {hash_password(password)} Free\n"


def test_register_duplicate_raises(auth):
    auth.register("alice", "password")
    with pytest.raises(UserExistsError):
        auth.register("alice", "secret")
    assert len(auth.users()) == 1


def test_log_in_wrong_password(auth):
    auth.register("alice", "password")
    assert auth.log_in("alice", "secret") is False
    assert auth.logged_in is False
    assert auth.user is None


def test_log_in_unknown_user(auth):
    assert auth.log_in("nobody", "password") is False
    assert auth.db_path.is_file()


def test_interactive_register_success(auth, monkeypatch, capsys):
    _fake_inputs(monkeypatch, "password", "password")
    assert auth.interactive_register("alice") is True
    assert "User successfully created!" in capsys.readouterr().out
    assert [u.username for u in auth.users()] == ["alice"]


def test_interactive_register_mismatch(auth, monkeypatch, capsys):
    _fake_inputs(monkeypatch, "password", "secret")
    assert auth.interactive_register("alice") is False
    assert "Password must be the same." in capsys.readouterr().out
    assert auth.users() == []


def test_interactive_register_existing(auth, monkeypatch, capsys):
    auth.register("alice", "password")
    _fake_inputs(monkeypatch, "secret", "secret")
    assert auth.interactive_register("alice") is False
    assert "User already exists." in capsys.readouterr().out


def test_interactive_log_in(auth, monkeypatch, capsys):
    auth.register("alice", "password")
    _fake_inputs(monkeypatch, "secret", "password")
    assert auth.interactive_log_in("alice") is False
    assert "Wrong username or password." in capsys.readouterr().out
    assert auth.interactive_log_in("alice") is True
    assert "Successfully logged in!" in capsys.readouterr().out
    assert auth.logged_in is True