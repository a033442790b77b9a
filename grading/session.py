import logging

from django.utils.crypto import constant_time_compare, get_random_string

logger = logging.getLogger(__name__)

SESSION_KEY = "sesskey"


class SessionTokenGuard:
    """Per-session anti-forgery token, kept in the Django session."""

    def __init__(self, session):
        self.session = session

    def current_token(self) -> str:
        token = self.session.get(SESSION_KEY)
        if not token:
            token = get_random_string(10)
            self.session[SESSION_KEY] = token
        return token

    def validate_token(self, candidate) -> bool:
        if not candidate:
            return False
        ok = constant_time_compare(str(candidate), self.current_token())
        if not ok:
            logger.warning("Rejected anti-forgery token")
        return ok
