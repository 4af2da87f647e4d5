from abc import ABC, abstractmethod


class IEmailSender(ABC):
    """Outbound email transport - application layer"""

    @abstractmethod
    async def send(
        self, to_address: str, subject: str, text_body: str, html_body: str
    ) -> None:
        """Deliver a fully rendered message"""
        pass
