"""Engine configuration."""

from __future__ import annotations

from dataclasses import dataclass

from designsync.model.variants import Breakpoint, UIState


@dataclass(frozen=True)
class SyncConfig:
    debounce_delay_ms: int = 150
    default_breakpoint: Breakpoint = Breakpoint.DESKTOP
    default_ui_state: UIState = UIState.NEUTRAL

    @property
    def debounce_delay(self) -> float:
        """Debounce delay in seconds."""
        return self.debounce_delay_ms / 1000.0
