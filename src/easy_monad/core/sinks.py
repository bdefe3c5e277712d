# src/easy_monad/core/sinks.py
"""
Sinks de log das Operations.

Um sink é qualquer objeto com `info(str)` e `error(str)`; um
`logging.Logger` da biblioteca padrão já satisfaz o contrato e é o sink
padrão. `EventLogSink` guarda as linhas como eventos estruturados em
memória (nível, mensagem, timestamp UTC), útil para inspeção e testes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable


@runtime_checkable
class LogSink(Protocol):
    def info(self, message: str) -> Any:
        ...

    def error(self, message: str) -> Any:
        ...


@dataclass
class EventLogSink:
    """Sink em memória com eventos estruturados."""

    events: List[Dict[str, Any]] = field(default_factory=list)

    def _record(self, level: str, message: str) -> None:
        self.events.append(
            {
                "level": level,
                "message": message,
                "timestamp": datetime.now(timezone.utc).isoformat(),
            }
        )

    def info(self, message: str) -> None:
        self._record("INFO", message)

    def error(self, message: str) -> None:
        self._record("ERROR", message)

    def messages(self, level: Optional[str] = None) -> List[str]:
        return [e["message"] for e in self.events if level is None or e["level"] == level]
