"""Session configuration builder.

SessionProperties collects string properties for a mail session and
produces the session on demand. Once a session is held, the properties
are frozen: every ``set`` call raises ConfigurationError. Assigning a
different session is still allowed.
"""

import logging
from typing import Callable, Dict, Mapping, Optional, TypeVar, Union

from .config import system_properties as ambient_properties
from .session import MailSession, SessionProvider, default_provider

logger = logging.getLogger(__name__)

SelfT = TypeVar("SelfT", bound="SessionProperties")


class MailSessionError(Exception):
    """Base class for errors raised while configuring mail sessions."""

    pass


class ConfigurationError(MailSessionError):
    """Raised when properties are changed after a session is assigned.

    This signals a programming error; build a new configuration instead.
    """

    pass


class SessionProperties:
    """Fluent builder for a MailSession.

    Subclasses decide when the session should be created (usually right
    before connecting) and call ``create_session`` for it. Every fluent
    method returns the instance itself, typed as the concrete subclass.

    Not thread safe: the guard check and the mutation are separate steps.

    Attributes:
        provider: Factory used to materialize sessions
        system_properties: Callable returning the ambient property snapshot
    """

    def __init__(
        self,
        provider: Optional[SessionProvider] = None,
        system_properties: Optional[Callable[[], Mapping[str, str]]] = None,
    ) -> None:
        self.provider = provider if provider is not None else default_provider
        self.system_properties = system_properties if system_properties is not None else ambient_properties
        self._properties: Dict[str, str] = {}
        self._session: Optional[MailSession] = None

    def get_session(self) -> Optional[MailSession]:
        """Return the held session, or None if none was created yet."""
        return self._session

    def get_properties(self) -> Dict[str, str]:
        """Return the live property dictionary (not a copy)."""
        return self._properties

    def create_session(self, properties: Optional[Mapping[str, str]] = None) -> MailSession:
        """Create a new session and hold it.

        Accumulated properties are not used implicitly; pass
        ``get_properties()`` to build from them.

        Args:
            properties: Properties for the session. When None, the ambient
                system properties are used instead.

        Returns:
            The newly created session
        """
        if properties is None:
            properties = self.system_properties()

        session = self.provider.get_instance(properties)
        self.session(session)
        return session

    def set(
        self: SelfT,
        name_or_properties: Union[str, Mapping[str, str]],
        value: Optional[str] = None,
    ) -> SelfT:
        """Set one property, or copy all entries of a mapping.

        Existing keys are overwritten.

        Args:
            name_or_properties: Property name, or a mapping of properties
            value: Property value when a single name is given

        Returns:
            This builder

        Raises:
            ConfigurationError: If a session has already been assigned
            TypeError: If a single name is given without a value, or a
                mapping is given together with a value
        """
        self._check_session_not_set()

        if isinstance(name_or_properties, str):
            if value is None:
                raise TypeError(f"No value given for property {name_or_properties!r}")
            self._properties[name_or_properties] = value
        else:
            if value is not None:
                raise TypeError("A value cannot be given together with a mapping of properties")
            self._properties.update(name_or_properties)
        return self

    def session(self: SelfT, session: MailSession) -> SelfT:
        """Assign a custom session. Properties are ignored from now on.

        Replacing a previously held session is allowed. There is no way
        back to an unassigned session.

        Raises:
            TypeError: If session is None
        """
        if session is None:
            raise TypeError("A session is required")
        if self._session is not None:
            logger.debug("Replacing previously assigned mail session")
        self._session = session
        return self

    def default_session(self: SelfT) -> SelfT:
        """Use the shared default session built from the system properties."""
        self._session = self.provider.get_default_instance(self.system_properties())
        return self

    def _check_session_not_set(self) -> None:
        if self._session is not None:
            logger.warning("Rejected property change on a configuration with an assigned session")
            raise ConfigurationError("Can't set properties after session is assigned")
