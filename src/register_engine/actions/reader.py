"""Feeds keystrokes through the keymap and runs the register command they name."""

from __future__ import annotations

from typing import Callable, List, Optional

from register_engine.keymaps.models import ActionRef
from register_engine.keymaps.resolver import KeymapResolver
from register_engine.registers import RegisterError
from register_engine.runtime import telemetry

from .commands import Region, RegisterRequest
from .registers import CommandResult, RegisterContext

RegionProvider = Callable[[], Optional[Region]]


class RegisterCommandReader:
    """Small state machine: key sequence, then register key, then execute.

    Register failures come back as ``status="error"`` results carrying the
    message, so a status line can show them; anything else propagates.
    """

    def __init__(
        self,
        context: RegisterContext,
        resolver: KeymapResolver,
        *,
        region: Optional[RegionProvider] = None,
    ) -> None:
        self.context = context
        self._resolver = resolver
        self._region = region
        self._pending: List[str] = []
        self._awaiting: Optional[ActionRef] = None
        self._prefix: Optional[int] = None

    @property
    def awaiting_register(self) -> bool:
        return self._awaiting is not None

    def reset(self) -> None:
        self._pending.clear()
        self._awaiting = None
        self._prefix = None

    def feed(self, token: str, *, prefix: Optional[int] = None) -> CommandResult:
        """Consume one keystroke token.

        ``prefix`` is remembered from the first keystroke of a command and
        passed on as the prefix argument.
        """

        if self._awaiting is not None:
            action = self._awaiting
            self._awaiting = None
            return self._execute(action, register=token)

        if not self._pending:
            self._prefix = prefix
        self._pending.append(token)
        result = self._resolver.resolve(self._pending)

        if result.status == "pending":
            return CommandResult(status="pending", message=" ".join(self._pending))

        self._pending.clear()
        if result.status == "miss" or result.match is None:
            self._prefix = None
            return CommandResult(status="miss", message=token)

        action = result.match.action
        if action.reads_register:
            self._awaiting = action
            return CommandResult(status="awaiting_register", message=action.id)
        return self._execute(action, register=None)

    def _execute(self, action: ActionRef, *, register: Optional[str]) -> CommandResult:
        prefix, self._prefix = self._prefix, None
        with telemetry.span(
            "keymaps::execute",
            component="keymaps",
            metadata={"action": action.id, "register": register},
        ):
            try:
                region = self._region() if action.uses_region and self._region else None
                request = RegisterRequest(
                    register=register, region=region, prefix=prefix
                )
                outcome = action(self.context, request)
            except (RegisterError, ValueError) as exc:
                telemetry.record_event(
                    "command.error",
                    level="warning",
                    data={"action": action.id, "error": str(exc)},
                )
                return CommandResult(status="error", key=register, message=str(exc))

        if isinstance(outcome, CommandResult):
            return outcome
        return CommandResult(status="ok", key=register, payload=outcome)


__all__ = ["RegisterCommandReader", "RegionProvider"]
