"""Tests for the diagnostics log."""

from sprite_utils import DiagnosticsConfig, DiagnosticsManager


def make(**overrides):
    return DiagnosticsManager(DiagnosticsConfig(**overrides))


class TestDiagnosticsManager:
    def test_records_and_emits(self, recorder):
        diag = make()
        lines = recorder(diag.entry_logged)
        diag.log_frames("Created frame 1", frame_index=1)
        assert lines == [("frames: Created frame 1", "INFO")]
        entry = diag.entries()[0]
        assert entry["category"] == "frames"
        assert entry["frame_index"] == 1
        assert entry["timestamp"].endswith("Z")

    def test_minimum_severity(self):
        diag = make(minimum_severity="WARNING")
        diag.log_edits("quiet")
        diag.log_edits("loud", severity="ERROR")
        assert [e["message"] for e in diag.entries()] == ["loud"]

    def test_category_toggle(self):
        diag = make()
        diag.log_color("ignored by default")
        diag.log_general("kept")
        assert [e["category"] for e in diag.entries()] == ["general"]

    def test_disabled(self):
        diag = make(enabled=False)
        diag.log_general("nothing")
        assert diag.entries() == []

    def test_max_entries(self):
        diag = make(max_entries=3)
        for i in range(5):
            diag.log_general(f"m{i}")
        assert [e["message"] for e in diag.entries()] == ["m2", "m3", "m4"]

    def test_rate_limit(self):
        diag = make(rate_limit_per_sec=2)
        for i in range(5):
            diag.log_general(f"m{i}")
        assert len(diag.entries()) == 2

    def test_debug_payloads(self):
        diag = make(include_debug_payloads=True, minimum_severity="DEBUG")
        diag.log_file("saved", extra={"frames": 2})
        assert diag.entries()[0]["extra"] == {"frames": 2}

    def test_export(self, tmp_path):
        diag = make()
        diag.log_animation("Started")
        path = tmp_path / "logs" / "diag.log"
        ok, message = diag.export_to_file(str(path))
        assert ok, message
        assert "INFO animation: Started" in path.read_text(encoding="utf-8")

    def test_export_without_path(self):
        ok, _ = make().export_to_file("")
        assert not ok

    def test_clear(self):
        diag = make()
        diag.log_general("x")
        diag.clear()
        assert diag.entries() == []
