from __future__ import annotations

from statemachine import State, StateMachine


class SessionFSM(StateMachine):
    """Lifecycle of one connection's game session.

    opening -> running -> finished   (player quit)
    opening | running -> dropped    (transport went away, send failed, forced shutdown)

    The session loop drives these transitions; anything else raises
    `TransitionNotAllowed`.
    """

    opening = State("opening", value="opening", initial=True)
    running = State("running", value="running")
    finished = State("finished", value="finished", final=True)
    dropped = State("dropped", value="dropped", final=True)

    activate = opening.to(running)
    quit = running.to(finished)
    drop = opening.to(dropped) | running.to(dropped)

    @property
    def is_closed(self) -> bool:
        return self.current_state_value in (self.finished.value, self.dropped.value)
