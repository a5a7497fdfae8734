import os

_TRUE = ("true", "1", "yes")
_FALSE = ("false", "0", "no")


class FakeSmithSettings:
    """Environment-based settings for new contexts, with optional overrides."""

    def __init__(self, overrides: dict[str, str] | None = None) -> None:
        self._env = dict(os.environ)
        if overrides:
            self._env.update(overrides)

    def get(self, key: str, default: str = "") -> str:
        return self._env.get(key, default)

    @property
    def log_impl(self) -> str:
        return self.get("FAKE_SMITH_LOG_IMPL", "memory")

    @property
    def default_auto_ack(self) -> bool:
        key = "FAKE_SMITH_DEFAULT_AUTO_ACK"
        return _parse_bool(key, self.get(key, "true"))

    def __repr__(self) -> str:
        return f"FakeSmithSettings(log_impl={self.log_impl!r})"


def _parse_bool(key: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE:
        return True
    if lowered in _FALSE:
        return False
    raise ValueError(f"Invalid boolean for {key}: '{value}'")
