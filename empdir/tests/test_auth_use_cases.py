from __future__ import annotations

from datetime import UTC, datetime

import pytest

from empdir.application.services.session_tokens import JwtSessionTokenCodec
from empdir.application.use_cases.accounts.login_account import LoginAccountUseCase
from empdir.application.use_cases.accounts.logout_account import LogoutAccountUseCase
from empdir.application.use_cases.accounts.register_account import RegisterAccountUseCase
from empdir.application.use_cases.accounts.who_am_i import WhoAmIUseCase
from empdir.domain.accounts.entities import Account, Principal
from empdir.domain.accounts.exceptions import (
    AccountAlreadyExistsError,
    AccountNotFoundError,
    InvalidCredentialsError,
)
from empdir.domain.accounts.repositories import AccountRepository, PasswordHasher
from empdir.tests.helpers import TEST_SECRET


class InMemoryAccountRepository(AccountRepository):
    def __init__(self) -> None:
        self._accounts: dict[str, Account] = {}
        self._seq = 1

    def find_by_username(self, username: str) -> Account | None:
        return self._accounts.get(username)

    def find_by_id(self, account_id: int) -> Account | None:
        return next((a for a in self._accounts.values() if a.id == account_id), None)

    def create(self, sequence_id: int, username: str, password_hash: str) -> Account:
        if username in self._accounts or any(
            a.sequence_id == sequence_id for a in self._accounts.values()
        ):
            raise AccountAlreadyExistsError()
        account = Account(
            id=self._seq,
            sequence_id=sequence_id,
            username=username,
            password_hash=password_hash,
            created_at=datetime.now(UTC),
        )
        self._seq += 1
        self._accounts[username] = account
        return account

    def remove(self, username: str) -> None:
        self._accounts.pop(username, None)


class DeterministicHasher(PasswordHasher):
    def __init__(self) -> None:
        self.verify_calls = 0

    def hash(self, password: str) -> str:
        return f"hashed:{password}"

    def verify(self, password: str, hashed: str) -> bool:
        self.verify_calls += 1
        return hashed == f"hashed:{password}"


@pytest.fixture()
def accounts() -> InMemoryAccountRepository:
    return InMemoryAccountRepository()


@pytest.fixture()
def hasher() -> DeterministicHasher:
    return DeterministicHasher()


@pytest.fixture()
def codec() -> JwtSessionTokenCodec:
    return JwtSessionTokenCodec(TEST_SECRET)


def test_register_stores_hash_not_secret(
    accounts: InMemoryAccountRepository, hasher: DeterministicHasher
) -> None:
    use_case = RegisterAccountUseCase(accounts=accounts, password_hasher=hasher)

    account = use_case.execute(1, "alice", "p@ss1234")

    assert account.username == "alice"
    assert account.sequence_id == 1
    assert account.password_hash == "hashed:p@ss1234"


def test_register_duplicate_username_raises(
    accounts: InMemoryAccountRepository, hasher: DeterministicHasher
) -> None:
    use_case = RegisterAccountUseCase(accounts=accounts, password_hasher=hasher)
    use_case.execute(1, "alice", "p@ss1234")

    with pytest.raises(AccountAlreadyExistsError):
        use_case.execute(2, "alice", "other")


def test_register_duplicate_sequence_id_raises_same_error(
    accounts: InMemoryAccountRepository, hasher: DeterministicHasher
) -> None:
    use_case = RegisterAccountUseCase(accounts=accounts, password_hasher=hasher)
    use_case.execute(1, "alice", "p@ss1234")

    with pytest.raises(AccountAlreadyExistsError) as info:
        use_case.execute(1, "bob", "p@ss1234")

    assert info.value.message == "User already exists"


def test_login_issues_verifiable_token(
    accounts: InMemoryAccountRepository,
    hasher: DeterministicHasher,
    codec: JwtSessionTokenCodec,
) -> None:
    RegisterAccountUseCase(accounts=accounts, password_hasher=hasher).execute(
        1, "alice", "p@ss1234"
    )
    login = LoginAccountUseCase(accounts=accounts, password_hasher=hasher, tokens=codec)

    session = login.execute("alice", "p@ss1234")

    assert session.username == "alice"
    assert codec.verify(session.token) == Principal(account_id=session.account_id, username="alice")


def test_login_failures_are_indistinguishable(
    accounts: InMemoryAccountRepository,
    hasher: DeterministicHasher,
    codec: JwtSessionTokenCodec,
) -> None:
    RegisterAccountUseCase(accounts=accounts, password_hasher=hasher).execute(
        1, "alice", "p@ss1234"
    )
    login = LoginAccountUseCase(accounts=accounts, password_hasher=hasher, tokens=codec)

    with pytest.raises(InvalidCredentialsError) as wrong_secret:
        login.execute("alice", "wrong")
    with pytest.raises(InvalidCredentialsError) as unknown_user:
        login.execute("nobody", "p@ss1234")

    assert wrong_secret.value.to_dict() == unknown_user.value.to_dict()
    assert wrong_secret.value.status == unknown_user.value.status


def test_login_unknown_user_still_runs_a_hash_comparison(
    accounts: InMemoryAccountRepository,
    hasher: DeterministicHasher,
    codec: JwtSessionTokenCodec,
) -> None:
    login = LoginAccountUseCase(accounts=accounts, password_hasher=hasher, tokens=codec)

    with pytest.raises(InvalidCredentialsError):
        login.execute("nobody", "p@ss1234")

    assert hasher.verify_calls == 1


def test_logout_is_unconditional(codec: JwtSessionTokenCodec) -> None:
    logout = LogoutAccountUseCase(tokens=codec)

    assert logout.execute(None) is None
    assert logout.execute("garbage") is None
    assert logout.execute(codec.issue(5, "alice").token) == 5


def test_who_am_i_returns_account(
    accounts: InMemoryAccountRepository, hasher: DeterministicHasher
) -> None:
    account = RegisterAccountUseCase(accounts=accounts, password_hasher=hasher).execute(
        1, "alice", "p@ss1234"
    )

    found = WhoAmIUseCase(accounts=accounts).execute(
        Principal(account_id=account.id, username="alice")
    )

    assert found.username == "alice"


def test_who_am_i_for_deleted_account_raises_not_found(
    accounts: InMemoryAccountRepository, hasher: DeterministicHasher
) -> None:
    account = RegisterAccountUseCase(accounts=accounts, password_hasher=hasher).execute(
        1, "alice", "p@ss1234"
    )
    accounts.remove("alice")

    with pytest.raises(AccountNotFoundError):
        WhoAmIUseCase(accounts=accounts).execute(
            Principal(account_id=account.id, username="alice")
        )
