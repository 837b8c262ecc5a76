"""Anonymous usage telemetry settings and local event log."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


@dataclass
class TelemetryEvent:
    """A single CLI invocation."""

    timestamp: str
    command: str | None
    tags: dict[str, Any] = field(default_factory=dict)


class TelemetrySettings:
    """Stores whether telemetry is enabled and records CLI invocations.

    Events are only appended to a local log; nothing is sent anywhere.
    """

    def __init__(self, config_dir: str | Path | None = None) -> None:
        """Initialize telemetry settings.

        Args:
            config_dir: Directory holding telemetry.json and events.log
                (defaults to ~/.content-cli)
        """
        if config_dir:
            self.config_dir = Path(config_dir)
        else:
            self.config_dir = Path.home() / ".content-cli"

        self.settings_file = self.config_dir / "telemetry.json"
        self.events_file = self.config_dir / "events.log"
        self._tags: dict[str, Any] = {}
        self._enabled = self._load_enabled()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def default_tags(self) -> dict[str, Any]:
        return dict(self._tags)

    def _load_enabled(self) -> bool:
        try:
            with open(self.settings_file) as f:
                data = json.load(f)
        except FileNotFoundError:
            return True
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable telemetry settings: {e}")
            return True
        return bool(data.get("enabled", True)) if isinstance(data, dict) else True

    def set_enabled(self, enabled: bool) -> None:
        """Persist the telemetry opt-in flag."""
        self._enabled = enabled
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.settings_file, "w") as f:
                json.dump({"enabled": enabled}, f)
        except OSError as e:
            logger.error(f"Failed to save telemetry settings: {e}")

    def set_default_tags(self, **tags: Any) -> None:
        """Attach tags to every subsequent event."""
        self._tags.update({k: v for k, v in tags.items() if v is not None})

    def track_cli(self, argv: list[str]) -> TelemetryEvent | None:
        """Record a CLI invocation if telemetry is enabled.

        Args:
            argv: Arguments after the program name

        Returns:
            The recorded event, or None when disabled
        """
        if not self._enabled:
            return None

        event = TelemetryEvent(
            timestamp=datetime.now().isoformat(),
            command=argv[0] if argv else None,
            tags=self.default_tags,
        )
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            with open(self.events_file, "a") as f:
                f.write(json.dumps(asdict(event)) + "\n")
        except OSError as e:
            logger.error(f"Failed to write telemetry event: {e}")

        return event
