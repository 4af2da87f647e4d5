from datetime import timedelta
from functools import lru_cache

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.email_sender import LoggingEmailSender, SmtpEmailSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.account_notifier import AccountNotifier
from src.app.services.email_sender import IEmailSender
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_token_service() -> TokenService:
    """Process-wide token service; the signing secret is read once at startup."""
    return TokenService(
        secret=ApplicationConfig.JWT_SECRET,
        session_ttl=timedelta(seconds=ApplicationConfig.SESSION_TOKEN_TTL_SECONDS),
        reset_ttl=timedelta(seconds=ApplicationConfig.RESET_TOKEN_TTL_SECONDS),
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


@lru_cache
def get_email_sender() -> IEmailSender:
    if not ApplicationConfig.SMTP_HOST:
        return LoggingEmailSender()
    return SmtpEmailSender(
        host=ApplicationConfig.SMTP_HOST,
        port=ApplicationConfig.SMTP_PORT,
        from_address=ApplicationConfig.HOST_EMAIL,
        username=ApplicationConfig.SMTP_USERNAME or None,
        password=ApplicationConfig.SMTP_PASSWORD or None,
        use_tls=ApplicationConfig.SMTP_USE_TLS,
    )


def get_notifier() -> AccountNotifier:
    return AccountNotifier(get_email_sender(), ApplicationConfig.APP_DOMAIN)
