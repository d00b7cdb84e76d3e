# src/atlas_tokens/core/pipeline/context.py
"""
Contexto de execução de uma exportação.

O `RunContext` é o único canal entre Steps: guarda a configuração
efetiva, o artifact store, os eventos de log estruturados e os avisos
não fatais agrupados por Step.

Logging:
    Não há logger global. Cada evento é um dict com `run_id`, `step_id`,
    `level`, `message`, `timestamp` (UTC, ISO 8601) e campos extras
    livres. Os eventos acompanham o resultado da run e podem ser
    gravados no manifest.

Invariantes:
    - Um RunContext por exportação (nada é compartilhado entre runs)
    - Artefatos são indexados por chave explícita
    - Ler um artefato inexistente levanta `MissingArtifactError`
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List

from atlas_tokens.core.exceptions import MissingArtifactError


@dataclass
class RunContext:
    run_id: str
    created_at: datetime
    config: Dict[str, Any]
    meta: Dict[str, Any] = field(default_factory=dict)

    _artifacts: Dict[str, Any] = field(default_factory=dict, init=False, repr=False)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Artifact store
    # -----------------------------
    def set_artifact(self, key: str, value: Any) -> None:
        self._artifacts[key] = value

    def has_artifact(self, key: str) -> bool:
        return key in self._artifacts

    def get_artifact(self, key: str) -> Any:
        if key not in self._artifacts:
            raise MissingArtifactError(
                f"Artefato ausente: {key}",
                {"artifact": key, "available": sorted(self._artifacts)},
                "Verifique `depends_on` do Step que consome o artefato.",
            )
        return self._artifacts[key]

    # -----------------------------
    # Logging & warnings
    # -----------------------------
    def log(self, *, step_id: str, level: str, message: str, **extra: Any) -> None:
        event: Dict[str, Any] = {
            "run_id": self.run_id,
            "step_id": step_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, step_id: str, message: str) -> None:
        self.warnings.setdefault(step_id, []).append(message)
        self.log(step_id=step_id, level="warning", message=message)
