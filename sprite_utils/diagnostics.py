from __future__ import annotations

import json
import os
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Deque, Dict, List, Optional, Tuple

from PyQt6.QtCore import QObject, QTimer, pyqtSignal


@dataclass
class DiagnosticsConfig:
    """User-configurable toggles for the editor log."""

    enabled: bool = True
    log_frame_events: bool = True
    log_edit_events: bool = True
    log_animation_events: bool = True
    log_color_events: bool = False
    log_file_events: bool = True
    include_debug_payloads: bool = False
    max_entries: int = 2000
    rate_limit_per_sec: int = 120
    minimum_severity: str = "INFO"
    auto_export_enabled: bool = False
    auto_export_interval_sec: int = 120
    export_path: str = ""


class DiagnosticsManager(QObject):
    """Collects editor log entries and forwards them to whichever view listens."""

    entry_logged = pyqtSignal(str, str)

    SEVERITY_ORDER = {
        "DEBUG": 0,
        "INFO": 1,
        "SUCCESS": 1,
        "WARNING": 2,
        "ERROR": 3,
    }

    CATEGORY_FLAGS = {
        "frames": "log_frame_events",
        "edits": "log_edit_events",
        "animation": "log_animation_events",
        "color": "log_color_events",
        "file": "log_file_events",
        "general": None,
    }

    def __init__(self, config: Optional[DiagnosticsConfig] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.config = config or DiagnosticsConfig()
        self.events: Deque[Dict[str, object]] = deque()
        self._rate_window: Deque[datetime] = deque()
        self._export_timer = QTimer(self)
        self._export_timer.timeout.connect(self._auto_export)
        self.last_export_path: Optional[str] = None
        self.apply_config(self.config)

    # ------------------------------------------------------------------ #
    # Configuration
    # ------------------------------------------------------------------ #
    def apply_config(self, config: DiagnosticsConfig):
        """Apply user preferences."""
        self.config = config
        if config.enabled and config.auto_export_enabled and config.export_path:
            self._export_timer.setInterval(max(5_000, config.auto_export_interval_sec * 1000))
            self._export_timer.start()
        else:
            self._export_timer.stop()

        if not config.enabled:
            self.events.clear()

    # ------------------------------------------------------------------ #
    # Logging helpers
    # ------------------------------------------------------------------ #
    def log_frames(self, message: str, *, frame_index: Optional[int] = None,
                   severity: str = "INFO", extra: Optional[Dict[str, object]] = None):
        self._log("frames", message, frame_index=frame_index, severity=severity, extra=extra)

    def log_edits(self, message: str, *, frame_index: Optional[int] = None,
                  severity: str = "INFO", extra: Optional[Dict[str, object]] = None):
        self._log("edits", message, frame_index=frame_index, severity=severity, extra=extra)

    def log_animation(self, message: str, *, frame_index: Optional[int] = None,
                      severity: str = "INFO", extra: Optional[Dict[str, object]] = None):
        self._log("animation", message, frame_index=frame_index, severity=severity, extra=extra)

    def log_color(self, message: str, *, severity: str = "INFO",
                  extra: Optional[Dict[str, object]] = None):
        self._log("color", message, frame_index=None, severity=severity, extra=extra)

    def log_file(self, message: str, *, severity: str = "INFO",
                 extra: Optional[Dict[str, object]] = None):
        self._log("file", message, frame_index=None, severity=severity, extra=extra)

    def log_general(self, message: str, *, severity: str = "INFO",
                    extra: Optional[Dict[str, object]] = None):
        self._log("general", message, frame_index=None, severity=severity, extra=extra)

    def _log(
        self,
        category: str,
        message: str,
        *,
        frame_index: Optional[int],
        severity: str,
        extra: Optional[Dict[str, object]],
    ):
        cfg = self.config
        if not cfg.enabled:
            return

        flag_name = self.CATEGORY_FLAGS.get(category)
        if flag_name and not getattr(cfg, flag_name, False):
            return

        if self.SEVERITY_ORDER.get(severity, 0) < self.SEVERITY_ORDER.get(cfg.minimum_severity, 0):
            return

        now = datetime.now(timezone.utc)
        self._rate_window.append(now)
        window_start = now - timedelta(seconds=1)
        while self._rate_window and self._rate_window[0] < window_start:
            self._rate_window.popleft()
        if cfg.rate_limit_per_sec and len(self._rate_window) > cfg.rate_limit_per_sec:
            return

        payload = {
            "timestamp": now.strftime("%Y-%m-%dT%H:%M:%S.") + f"{now.microsecond // 1000:03d}Z",
            "category": category,
            "severity": severity,
            "message": message,
        }
        if cfg.include_debug_payloads and extra:
            payload["extra"] = extra
        if frame_index is not None:
            payload["frame_index"] = frame_index
        self.events.append(payload)
        while len(self.events) > cfg.max_entries:
            self.events.popleft()

        self.entry_logged.emit(f"{category}: {message}", severity)

    # ------------------------------------------------------------------ #
    # Queries
    # ------------------------------------------------------------------ #
    def entries(self, category: Optional[str] = None, severity: Optional[str] = None) -> List[Dict[str, object]]:
        return [
            event for event in self.events
            if (category is None or event["category"] == category)
            and (severity is None or event["severity"] == severity)
        ]

    def clear(self):
        self.events.clear()
        self._rate_window.clear()

    # ------------------------------------------------------------------ #
    # Export / persistence helpers
    # ------------------------------------------------------------------ #
    def export_to_file(self, filepath: str) -> Tuple[bool, str]:
        """Persist the in-memory log."""
        if not filepath:
            return False, "No export path specified."
        try:
            directory = os.path.dirname(filepath)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(filepath, "w", encoding="utf-8") as handle:
                for event in list(self.events):
                    line = f"[{event['timestamp']}] {event['severity']} {event['category']}: {event['message']}"
                    if self.config.include_debug_payloads and "extra" in event:
                        line += f" | {json.dumps(event['extra'], ensure_ascii=False)}"
                    handle.write(line + "\n")
            return True, f"Diagnostics exported to {filepath}"
        except OSError as exc:
            return False, f"Failed to export diagnostics: {exc}"

    def _auto_export(self):
        if not (self.config.enabled and self.config.auto_export_enabled and self.config.export_path):
            return
        base = self.config.export_path
        timestamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
        if os.path.isdir(base):
            filename = os.path.join(base, f"diagnostics-{timestamp}.log")
        else:
            root, ext = os.path.splitext(base)
            filename = f"{root}-{timestamp}{ext or '.log'}"
        success, _ = self.export_to_file(filename)
        if success:
            self.last_export_path = filename
