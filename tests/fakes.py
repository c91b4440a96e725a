"""Fake collaborators shared by the test suite."""

from mail_session.session import MailSession


class FakeSessionProvider:
    """Fake session provider that records every call it receives."""

    def __init__(self):
        self.instance_calls = []
        self.default_calls = []

    def get_instance(self, properties):
        self.instance_calls.append(dict(properties))
        return MailSession(properties)

    def get_default_instance(self, properties):
        self.default_calls.append(dict(properties))
        return MailSession(properties)


AMBIENT = {"mail.smtp.host": "ambient.example.org"}


def ambient_properties():
    return dict(AMBIENT)
