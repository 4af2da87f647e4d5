"""
Account Notifier

Renders lifecycle emails and hands them to the email transport.
Delivery is fire-and-forget: failures are logged and never propagated.
"""

import logging

from src.app.services.email_sender import IEmailSender
from src.domain.entities import Account

logger = logging.getLogger(__name__)


class AccountNotifier:
    def __init__(self, email_sender: IEmailSender, domain: str):
        self.email_sender = email_sender
        # Links are built as f"{domain}users/...", so keep a trailing slash
        self.domain = domain if domain.endswith("/") else domain + "/"

    async def send_verification(self, account: Account, token: str) -> None:
        html = f"""
        <div>
            <h1>Hello, {account.username}</h1>
            <p>Please click the following link to verify your account.</p>
            <a href="{self.domain}users/verify-now/{token}">Verify Now</a>
        </div>"""
        await self._deliver(
            account.email,
            "Verification Account",
            "Please verify Your Account.",
            html,
        )

    async def send_password_reset(self, account: Account, token: str) -> None:
        html = f"""
        <div>
            <h1>Hello, {account.username}</h1>
            <p>Please click the following link to reset your password</p>
            <p>If this password reset request is not created by you then you can ignore this email</p>
            <a href="{self.domain}users/reset-password-now/{token}">Reset Now</a>
        </div>"""
        await self._deliver(
            account.email,
            "Reset Password",
            "Please reset your password",
            html,
        )

    async def send_password_changed(self, account: Account) -> None:
        html = f"""
        <div>
            <h1>Hello, {account.username}</h1>
            <p>Your password is reset Successfully</p>
            <p>If this reset is not done by you then you can contact our team</p>
        </div>"""
        await self._deliver(
            account.email,
            "Reset Password Successful",
            "Your Password is changed.",
            html,
        )

    async def _deliver(
        self, to_address: str, subject: str, text_body: str, html_body: str
    ) -> None:
        try:
            await self.email_sender.send(to_address, subject, text_body, html_body)
        except Exception:
            logger.warning(
                "Failed to send %r email to %s", subject, to_address, exc_info=True
            )
