from typing import Any, Protocol


class UsernameGenerator(Protocol):
    """Strategy producing candidate usernames.

    Candidates need not be unique; the generation driver keeps asking for
    new ones until one is free.
    """
    def do_generate(self, parameter: Any) -> str:
        """Return a candidate username for the given strategy-specific parameter."""
        ...
