"""Concrete session configurations for sending and receiving mail.

Each setter writes a ``mail.<protocol>.*`` property through ``set`` and is
therefore refused once a session exists. Values are stored as strings and
are not checked beyond that.
"""

from typing import TypeVar

from . import config
from .properties import SessionProperties
from .session import MailSession

TransportT = TypeVar("TransportT", bound="TransportSessionProperties")


def _flag(value: bool) -> str:
    return "true" if value else "false"


class TransportSessionProperties(SessionProperties):
    """Session configuration for a single mail protocol.

    Abstract: subclasses set ``protocol``.

    Attributes:
        protocol: Protocol name used in property keys, e.g. 'smtp'
    """

    protocol = ""

    def key(self, name: str) -> str:
        """Return the full property key for a protocol setting."""
        if not self.protocol:
            raise TypeError(f"{type(self).__name__} does not define a protocol")
        return f"mail.{self.protocol}.{name}"

    def host(self: TransportT, host: str) -> TransportT:
        return self.set(self.key("host"), host)

    def port(self: TransportT, port: int) -> TransportT:
        return self.set(self.key("port"), str(port))

    def user(self: TransportT, user: str) -> TransportT:
        """Set the login name and switch authentication on."""
        return self.set({self.key("user"): user, self.key("auth"): "true"})

    def auth(self: TransportT, enabled: bool = True) -> TransportT:
        return self.set(self.key("auth"), _flag(enabled))

    def ssl(self: TransportT, enabled: bool = True) -> TransportT:
        return self.set(self.key("ssl.enable"), _flag(enabled))

    def starttls(self: TransportT, enabled: bool = True, required: bool = False) -> TransportT:
        return self.set({
            self.key("starttls.enable"): _flag(enabled),
            self.key("starttls.required"): _flag(required),
        })

    # Timeouts are in milliseconds
    def timeout(self: TransportT, millis: int) -> TransportT:
        return self.set(self.key("timeout"), str(millis))

    def connection_timeout(self: TransportT, millis: int) -> TransportT:
        return self.set(self.key("connectiontimeout"), str(millis))

    def write_timeout(self: TransportT, millis: int) -> TransportT:
        return self.set(self.key("writetimeout"), str(millis))

    def debug(self: TransportT, enabled: bool = True) -> TransportT:
        return self.set("mail.debug", _flag(enabled))

    def build(self) -> MailSession:
        """Return the held session, creating it from the set properties if needed."""
        session = self.get_session()
        if session is None:
            session = self.create_session(self.get_properties())
        return session


class SmtpSessionProperties(TransportSessionProperties):
    """Session configuration for sending mail over SMTP."""

    protocol = "smtp"

    @classmethod
    def from_env(cls, **kwargs) -> "SmtpSessionProperties":
        """Create a configuration seeded from the environment settings."""
        props = cls(**kwargs).host(config.SMTP_SERVER).port(config.SMTP_PORT)
        if config.SMTP_PORT == 587:
            props.starttls()
        elif config.SMTP_PORT == 465:
            props.ssl()
        if config.EMAIL_ADDRESS:
            props.user(config.EMAIL_ADDRESS)
        return props


class ImapSessionProperties(TransportSessionProperties):
    """Session configuration for reading mail over IMAP."""

    protocol = "imap"

    @classmethod
    def from_env(cls, **kwargs) -> "ImapSessionProperties":
        """Create a configuration seeded from the environment settings."""
        props = cls(**kwargs).host(config.IMAP_SERVER).port(config.IMAP_PORT)
        if config.IMAP_PORT == 993:
            props.ssl()
        if config.EMAIL_ADDRESS:
            props.user(config.EMAIL_ADDRESS)
        return props
