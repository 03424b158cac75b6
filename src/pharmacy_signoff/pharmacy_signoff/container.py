from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from .accounts.mysql_account_repository import MySQLAccountRepository
from .accounts.repository import AccountRepository
from .accounts.service import AccountService, AuthService
from .database.connection import DBConfig, DatabaseConnection
from .notifications.mailer import MailConfig, Mailer, SmtpMailer
from .notifications.service import SignoffNotifier
from .signoffs.mysql_signoff_repository import MySQLSignoffRepository
from .signoffs.repository import SignoffRepository
from .signoffs.service import SignoffService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    accounts_repo: AccountRepository
    signoffs_repo: SignoffRepository
    mailer: Mailer

    auth_service: AuthService
    account_service: AccountService
    signoff_service: SignoffService


def assemble(
    *,
    conn: Optional[DatabaseConnection],
    accounts_repo: AccountRepository,
    signoffs_repo: SignoffRepository,
    mailer: Mailer,
    allowed_emails: Iterable[str],
    notify_recipients: Optional[Iterable[str]] = None,
) -> Container:
    """Wire services around the given storage and mail handles."""
    account_service = AccountService(accounts_repo, allowed_emails)
    recipients = list(notify_recipients or sorted(account_service.allowed_emails))
    notifier = SignoffNotifier(mailer, recipients)

    return Container(
        conn=conn,
        accounts_repo=accounts_repo,
        signoffs_repo=signoffs_repo,
        mailer=mailer,
        auth_service=AuthService(accounts_repo),
        account_service=account_service,
        signoff_service=SignoffService(signoffs_repo, notifier),
    )


def build_container(
    *,
    db_config: dict,
    mail_config: dict,
    allowed_emails: Iterable[str],
    notify_recipients: Optional[Iterable[str]] = None,
) -> Container:
    conn = DatabaseConnection(DBConfig.from_dict(db_config))
    return assemble(
        conn=conn,
        accounts_repo=MySQLAccountRepository(conn),
        signoffs_repo=MySQLSignoffRepository(conn),
        mailer=SmtpMailer(MailConfig.from_dict(mail_config)),
        allowed_emails=allowed_emails,
        notify_recipients=notify_recipients,
    )
