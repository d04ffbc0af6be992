"""Single-key dispatch resolution with telemetry instrumentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Sequence

from vim_lite.runtime.telemetry import span

from .models import ActionRef, Binding
from .registry import KeymapRegistry


@dataclass(frozen=True, slots=True)
class ResolutionMatch:
    """Resolved binding paired with its action and the key that hit it."""

    binding: Binding
    action: ActionRef
    token: str
    text: Optional[str] = None


@dataclass(frozen=True, slots=True)
class ResolutionResult:
    """Outcome returned from the resolver."""

    status: Literal["match", "miss"]
    match: Optional[ResolutionMatch] = None


class KeymapResolver:
    """Maps ``(mode, key)`` to at most one action.

    The exact key token is tried first, then each fallback token in order
    (character keys fall back to the mode's catch-all character binding).
    """

    def __init__(
        self, registry: KeymapRegistry, *, logger_name: str | None = None
    ) -> None:
        self._registry = registry
        self._logger_name = logger_name

    def resolve(
        self,
        mode: str,
        token: str,
        *,
        fallbacks: Sequence[str] = (),
        text: Optional[str] = None,
    ) -> ResolutionResult:
        with span(
            "keymaps::resolve",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"mode": mode, "token": token},
        ) as handle:
            for candidate in (token, *fallbacks):
                binding = self._registry.lookup(mode, candidate)
                if binding is None:
                    continue
                action = self._registry.get_action(binding.action_id)
                handle.add_metadata("status", "match")
                handle.add_metadata("binding_id", binding.id)
                return ResolutionResult(
                    status="match",
                    match=ResolutionMatch(
                        binding=binding, action=action, token=token, text=text
                    ),
                )

            handle.add_metadata("status", "miss")
            return ResolutionResult(status="miss")


__all__ = [
    "KeymapResolver",
    "ResolutionResult",
    "ResolutionMatch",
]
