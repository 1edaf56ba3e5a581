# wayfind/domain/errors.py


class WayfindError(Exception):
    """Base for every error raised by wayfind."""


class LoadError(WayfindError, ValueError):
    """Graph source missing, unreadable, malformed or with a dangling edge reference."""


class NotFoundError(WayfindError, LookupError):
    """Unknown node id or facility category."""

    def __init__(self, kind: str, key: str):
        super().__init__(f"unknown {kind} {key!r}")
        self.kind, self.key = kind, key
