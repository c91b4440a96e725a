"""Session handles and the provider that materializes them.

A MailSession is the immutable result of session configuration. It is
handed to the transport layer, which owns every protocol concern.
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional, Protocol

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MailSession:
    """Materialized mail session.

    Attributes:
        properties: Read-only copy of the properties the session was made from
    """
    properties: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Copy first so later changes to the source mapping are not visible
        object.__setattr__(self, "properties", MappingProxyType(dict(self.properties)))

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        return self.properties.get(name, default)

    def __contains__(self, name: object) -> bool:
        return name in self.properties

    def __hash__(self) -> int:
        return hash(frozenset(self.properties.items()))

    @property
    def debug(self) -> bool:
        """Whether ``mail.debug`` is switched on for this session."""
        return self.get("mail.debug", "false").lower() == "true"


class SessionProvider(Protocol):
    """Factory capability that turns properties into sessions."""

    def get_instance(self, properties: Mapping[str, str]) -> MailSession:
        ...

    def get_default_instance(self, properties: Mapping[str, str]) -> MailSession:
        ...


class DefaultSessionProvider:
    """Session provider backed by MailSession.

    ``get_instance`` always creates a new session. ``get_default_instance``
    creates the shared session once and returns that same object on every
    later call, whatever properties are passed then.
    """

    def __init__(self) -> None:
        self._default: Optional[MailSession] = None

    def get_instance(self, properties: Mapping[str, str]) -> MailSession:
        logger.debug(f"Creating mail session from {len(properties)} properties")
        return MailSession(properties)

    def get_default_instance(self, properties: Mapping[str, str]) -> MailSession:
        if self._default is None:
            logger.info("Creating shared default mail session")
            self._default = MailSession(properties)
        return self._default

    def reset_default(self) -> None:
        """Forget the shared default session."""
        self._default = None


# Process-wide provider used when a builder is not given one
default_provider = DefaultSessionProvider()
