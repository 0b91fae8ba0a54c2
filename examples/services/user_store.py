"""Tagged named export example: registered as ``userStore``, not ``user_store``."""

from modwire import provider


def normalize_email(email: str) -> str:
    """Helper export; untagged, so never registered."""
    return email.strip().lower()


class _InMemoryUserStore:
    def __init__(self) -> None:
        self._users: dict[str, str] = {}

    def add(self, email: str, name: str) -> None:
        self._users[normalize_email(email)] = name

    def get(self, email: str) -> str | None:
        return self._users.get(normalize_email(email))


UserStore = provider(_InMemoryUserStore, lifetime="singleton")
