from .properties import ConfigurationError, MailSessionError, SessionProperties
from .session import DefaultSessionProvider, MailSession, SessionProvider, default_provider
from .transports import ImapSessionProperties, SmtpSessionProperties, TransportSessionProperties

__all__ = [
    'ConfigurationError',
    'DefaultSessionProvider',
    'ImapSessionProperties',
    'MailSession',
    'MailSessionError',
    'SessionProperties',
    'SessionProvider',
    'SmtpSessionProperties',
    'TransportSessionProperties',
    'default_provider',
]
