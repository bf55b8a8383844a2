"""Account registration, login and profile updates."""

import logging
from dataclasses import dataclass, replace
from typing import Protocol
from uuid import UUID

from fitness_tracker.domain.accounts import Account
from fitness_tracker.domain.errors import (
    AccountNotFound,
    EmailAlreadyExists,
    InvalidCredentials,
)
from fitness_tracker.services.auth import PasswordHasher, TokenService

_logger = logging.getLogger(__name__)


class AccountRepository(Protocol):
    """Persistence interface for accounts."""

    def get_by_id(self, user_id: UUID) -> Account | None:
        """Return the account with the id, if present."""

    def get_by_email(self, email: str) -> Account | None:
        """Return the account registered with the email, if present."""

    def create_account(self, name: str, email: str, password_hash: str) -> Account:
        """Create and return a new account."""

    def save_account(self, account: Account) -> Account:
        """Persist every field of an existing account and return it."""


@dataclass(frozen=True)
class AuthResult:
    """An account together with a freshly issued token."""

    account: Account
    token: str


@dataclass
class AccountService:
    """Application service for account lifecycle actions."""

    repository: AccountRepository
    hasher: PasswordHasher
    tokens: TokenService

    def register(self, name: str, email: str, password: str) -> AuthResult:
        """Create an account and sign it in."""
        if self.repository.get_by_email(email):
            raise EmailAlreadyExists()
        account = self.repository.create_account(
            name=name, email=email, password_hash=self.hasher.hash(password)
        )
        _logger.info("Registered account %s", account.id)
        return AuthResult(account=account, token=self.tokens.issue(account))

    def login(self, email: str, password: str) -> AuthResult:
        """Check credentials and return a new token."""
        account = self.repository.get_by_email(email)
        if account is None:
            raise AccountNotFound("User Not Found")
        if not self.hasher.verify(password, account.password_hash):
            raise InvalidCredentials()
        return AuthResult(account=account, token=self.tokens.issue(account))

    def get_account(self, user_id: UUID) -> Account:
        """Return an account or raise AccountNotFound."""
        account = self.repository.get_by_id(user_id)
        if account is None:
            raise AccountNotFound()
        return account

    def update_profile(  # noqa: PLR0913
        self,
        user_id: UUID,
        name: str | None = None,
        email: str | None = None,
        current_password: str | None = None,
        new_password: str | None = None,
    ) -> Account:
        """Update name, email and optionally the password."""
        account = self.repository.get_by_id(user_id)
        if account is None:
            raise AccountNotFound("User not Found")

        if current_password and new_password:
            if not self.hasher.verify(current_password, account.password_hash):
                raise InvalidCredentials("Current Password is incorrect")
            account = replace(account, password_hash=self.hasher.hash(new_password))
        if name:
            account = replace(account, name=name)
        if email:
            owner = self.repository.get_by_email(email)
            if owner is not None and owner.id != account.id:
                raise EmailAlreadyExists()
            account = replace(account, email=email)

        saved = self.repository.save_account(account)
        _logger.info("Updated profile for account %s", saved.id)
        return saved
