"""Message senders for e-mail and SMS, with failing and logging decorators."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

__all__ = [
    "SendError",
    "Sender",
    "EmailMessage",
    "SmsMessage",
    "EmailSender",
    "SmsSender",
    "AlwaysFailDecorator",
    "LogDecorator",
    "main",
]


class SendError(Exception):
    """Delivering a message failed."""


class Sender(ABC):
    """Something that delivers a message from one address to another."""

    @classmethod
    @abstractmethod
    def kind(cls) -> str:
        """Short name of the delivery channel."""

    @abstractmethod
    def send(self, sender: Any, recipient: Any, message: Any) -> None:
        """Deliver ``message``; raise SendError on failure."""


@dataclass
class EmailMessage:
    subject: str
    body: str

    def __str__(self) -> str:
        return f"SUBJECT: {self.subject}\nBODY: {self.body}"


@dataclass
class SmsMessage:
    text: str

    def __str__(self) -> str:
        return f"TEXT: {self.text}"


class EmailSender(Sender):
    """Sends e-mail messages."""

    @classmethod
    def kind(cls) -> str:
        return "EMAIL"

    def send(self, sender: Any, recipient: Any, message: EmailMessage) -> None:
        return None


class SmsSender(Sender):
    """Sends SMS messages."""

    @classmethod
    def kind(cls) -> str:
        return "SMS"

    def send(self, sender: Any, recipient: Any, message: SmsMessage) -> None:
        return None


class AlwaysFailDecorator(Sender):
    """Wraps a sender so that every delivery fails."""

    def __init__(self, wrapped: Sender) -> None:
        self._wrapped = wrapped

    def kind(self) -> str:  # type: ignore[override]
        return self._wrapped.kind()

    def send(self, sender: Any, recipient: Any, message: Any) -> None:
        raise SendError()


class LogDecorator(Sender):
    """Wraps a sender, printing each attempt and its outcome; never raises SendError."""

    def __init__(self, wrapped: Sender) -> None:
        self._wrapped = wrapped

    def kind(self) -> str:  # type: ignore[override]
        return self._wrapped.kind()

    def send(self, sender: Any, recipient: Any, message: Any) -> None:
        print("TRY SEND MESSAGE")
        print(f"SENDER KIND: {self.kind()}")
        print(f"FROM: {sender}")
        print(f"TO: {recipient}")
        print(message)
        try:
            self._wrapped.send(sender, recipient, message)
        except SendError as err:
            print(f"STATUS: FAIL\nERROR: {type(err).__name__}")
        else:
            print("STATUS: SUCCESS")


def main(argv: list[str] | None = None) -> int:
    """Show the senders with logging and always-failing decorators."""
    email_from = "sender@example.com"
    email_to = "recipient@example.com"
    sms_from = "sms-sender"
    sms_to = "sms-recipient"

    email_sender = EmailSender()
    sms_sender = SmsSender()

    print("EMAIL SENDER EXAMPLE WITH LOGGER DECORATOR EXAMPLE\n")
    LogDecorator(email_sender).send(
        email_from, email_to, EmailMessage("test subject", "test body")
    )
    print()

    print("SMS SENDER EXAMPLE WITH LOGGER DECORATOR EXAMPLE\n")
    LogDecorator(sms_sender).send(sms_from, sms_to, SmsMessage("test text"))

    print("EMAIL SENDER EXAMPLE WITH ALWAYS FAIL AND LOGGER DECORATOR EXAMPLE\n")
    LogDecorator(AlwaysFailDecorator(email_sender)).send(
        email_from, email_to, EmailMessage("test subject 2", "test body 2")
    )
    print()

    print("SMS SENDER EXAMPLE WITH ALWAYS FAIL AND LOGGER DECORATOR EXAMPLE\n")
    LogDecorator(AlwaysFailDecorator(sms_sender)).send(
        sms_from, sms_to, SmsMessage("test text")
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())