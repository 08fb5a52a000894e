"""Interactive signal handling: Ctrl-C interrupts, Ctrl-\\ is ignored."""

from __future__ import annotations

import signal
import sys
from dataclasses import dataclass
from typing import Any, Dict, Optional, TextIO

# Status reported after an interrupt, as a shell does for SIGINT.
INTERRUPT_STATUS = 130


@dataclass
class SignalState:
    """Records the last signal the shell received."""

    received: int = 0
    stream: Optional[TextIO] = None

    def handle_signal(self, signum: int, frame: Any) -> None:
        """On SIGINT, remember the interrupt and start a fresh prompt line."""
        if signum == signal.SIGINT:
            self.received = INTERRUPT_STATUS
            target = self.stream if self.stream is not None else sys.stdout
            target.write("\n")
            target.flush()

    def install(self) -> Dict[int, Any]:
        """Handle SIGINT with this state and ignore SIGQUIT.

        Returns the handlers that were in place before, keyed by signal.
        """
        previous = {signal.SIGINT: signal.signal(signal.SIGINT, self.handle_signal)}
        sigquit = getattr(signal, "SIGQUIT", None)
        if sigquit is not None:
            previous[sigquit] = signal.signal(sigquit, signal.SIG_IGN)
        return previous

    def reset(self) -> None:
        """Forget any signal received so far."""
        self.received = 0