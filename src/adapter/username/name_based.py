"""UsernameGenerator deriving usernames from a person's name."""

import re
import secrets
import threading
from collections import OrderedDict

USERNAME_MAX_LENGTH = 20
USERNAME_MIN_LENGTH = 3
FALLBACK_BASE = 'user'
RECENT_BASES_LIMIT = 1024
_DISALLOWED = re.compile(r'[^a-z0-9_]')


def slugify(name: str | None, fallback: str = FALLBACK_BASE) -> str:
    """Lowercase ``name`` and keep only letters, digits and underscores.

    Short or empty results are padded with ``fallback``.
    """
    base = _DISALLOWED.sub('', (name or '').strip().lower())
    if not base:
        base = fallback
    base = base[:USERNAME_MAX_LENGTH]
    if len(base) < USERNAME_MIN_LENGTH:
        base = (base + fallback)[:USERNAME_MAX_LENGTH]
    return base


class NameBasedUsernameGenerator:
    """First candidate is the bare slug, later ones get a random numeric suffix.

    Only the most recently offered bases are remembered, so a name that has
    not been seen for a while is offered bare again.

    Examples:
        - "John Smith" -> "johnsmith"
        - "John Smith" -> "johnsmith4821" (after "johnsmith" was offered once)
    """

    def __init__(self, suffix_digits: int = 4, max_recent: int = RECENT_BASES_LIMIT):
        self.suffix_digits = suffix_digits
        self.max_recent = max_recent
        self._recent: OrderedDict[str, None] = OrderedDict()
        self._lock = threading.Lock()

    def _offer_bare(self, base: str) -> bool:
        """Record ``base`` as offered. True if it was not offered recently."""
        with self._lock:
            if base in self._recent:
                self._recent.move_to_end(base)
                return False
            self._recent[base] = None
            if len(self._recent) > self.max_recent:
                self._recent.popitem(last=False)
            return True

    def do_generate(self, parameter: str | None) -> str:
        base = slugify(parameter)
        if self._offer_bare(base):
            return base

        suffix = str(secrets.randbelow(10 ** self.suffix_digits)).zfill(self.suffix_digits)
        return f"{base[:USERNAME_MAX_LENGTH - len(suffix)]}{suffix}"
