"""
Tests for the user collection helpers.

Run with: python3 -m pytest tests/ -v -k "users"
"""
import users


class TestCreateUser:

    def test_create_user(self, data_files):
        user = users.create_user("bob", "secret")

        assert user["username"] == "bob"
        assert user["password"] == "secret"
        assert users.find_user("bob") == user

    def test_duplicate_username(self, data_files):
        users.create_user("bob", "secret")

        assert users.create_user("bob", "other") is None
        assert len(users.read_users()) == 1


class TestCheckCredentials:

    def test_match(self, data_files):
        user = users.create_user("bob", "secret")

        assert users.check_credentials("bob", "secret") == user

    def test_wrong_password(self, data_files):
        users.create_user("bob", "secret")

        assert users.check_credentials("bob", "Secret") is None

    def test_unknown_user(self, data_files):
        assert users.check_credentials("ghost", "secret") is None
