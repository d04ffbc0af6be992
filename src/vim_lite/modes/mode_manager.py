"""Mode manager: owns the active mode and dispatches key events."""

from __future__ import annotations

from vim_lite.runtime import telemetry

from vim_lite.keymaps import KeymapRegistry, KeymapResolver, load_default_keymaps

from .base_mode import KeyInput, Mode, ModeContext, ModeResult


class ModeManager:
    """Routes each key through the active mode's dispatch table.

    At most one action runs per key. Keys the active mode does not bind are
    reported as ``status="noop"`` and leave all state untouched.
    """

    def __init__(
        self,
        context: ModeContext,
        *,
        initial_mode: Mode = Mode.NORMAL,
        keymap_registry: KeymapRegistry | None = None,
        keymap_resolver: KeymapResolver | None = None,
    ) -> None:
        self.context = context
        self._active = initial_mode
        self._quit_requested = False
        self.keymap_registry = keymap_registry or KeymapRegistry(
            logger_name="vim_lite.keymaps"
        )
        if keymap_registry is None:
            load_default_keymaps(self.keymap_registry)
        self.keymap_resolver = keymap_resolver or KeymapResolver(
            self.keymap_registry, logger_name="vim_lite.keymaps"
        )

    @property
    def active_mode(self) -> Mode:
        return self._active

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def switch_mode(self, mode: Mode) -> None:
        if mode is self._active:
            return
        previous = self._active
        self._active = mode
        telemetry.record_event(
            "mode.switch", data={"from": previous.value, "to": mode.value}
        )
        self.context.bus.emit("mode.switch", mode)

    def request_quit(self) -> None:
        if self._quit_requested:
            return
        self._quit_requested = True
        telemetry.record_event("editor.quit", data={"mode": self._active.value})
        self.context.bus.emit("editor.quit", None)

    def handle_key(self, key: KeyInput) -> ModeResult:
        mode = self._active
        with telemetry.span(
            name=f"mode::{mode.value}",
            component=True,
            metadata={"key": key.token, "mode": mode.value},
        ) as handle:
            resolution = self.keymap_resolver.resolve(
                mode.value, key.token, fallbacks=key.fallback_tokens, text=key.text
            )
            if resolution.match is None:
                handle.add_metadata("status", "noop")
                return ModeResult(consumed=False, status="noop")

            match = resolution.match
            outcome = match.action(self.context, match)
            result = (
                outcome if isinstance(outcome, ModeResult) else ModeResult(consumed=True)
            )
            handle.add_metadata("status", result.status)
        return self._after_mode_result(result)

    def _after_mode_result(self, result: ModeResult) -> ModeResult:
        if result.switch_to is not None:
            self.switch_mode(result.switch_to)
        if result.quit:
            self.request_quit()
        return result


__all__ = ["ModeManager"]
