# src/atlas_tokens/core/traceability/manifest.py
"""
Manifest de exportação — rastreabilidade de uma run do Atlas Tokens.

O manifest consolida:
    - run: run_id, started_at (UTC), atlas_version
    - inputs: hashes da configuração e do token set, pedido e opções
    - steps: estado final de cada Step (status, métricas, avisos, erro)
    - documents: destino, tamanho e SHA-256 de cada documento emitido
    - events: Event Log ordenado

Princípios:
    - Nenhum evento é emitido implicitamente
    - Toda mutação ocorre por chamadas explícitas da API
    - Persistência em JSON determinístico (`sort_keys=True`), com round-trip

Limites explícitos:
    - Não é um formato de armazenamento de documentos (apenas metadados)
    - Não executa pipeline nem decide políticas de execução
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from atlas_tokens.core.compose.documents import OutputDocument
    from atlas_tokens.core.pipeline.types import StepResult


def _ensure_tzaware_utc(dt: datetime) -> datetime:
    """Timestamps naive são assumidos UTC; os demais são convertidos."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def _iso(dt: datetime) -> str:
    return _ensure_tzaware_utc(dt).isoformat()


@dataclass
class ExportManifest:
    run: Dict[str, Any]
    inputs: Dict[str, Any]
    steps: Dict[str, Dict[str, Any]] = field(default_factory=dict)
    documents: List[Dict[str, Any]] = field(default_factory=list)
    events: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Cópia serializável e independente do estado interno."""
        return {
            "run": dict(self.run),
            "inputs": dict(self.inputs),
            "steps": {k: dict(v) for k, v in self.steps.items()},
            "documents": [dict(d) for d in self.documents],
            "events": [dict(e) for e in self.events],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExportManifest":
        """Reconstrução permissiva: seções ausentes iniciam vazias."""
        return cls(
            run=dict(data.get("run", {})),
            inputs=dict(data.get("inputs", {})),
            steps={k: dict(v) for k, v in (data.get("steps", {}) or {}).items()},
            documents=[dict(d) for d in (data.get("documents", []) or [])],
            events=[dict(e) for e in (data.get("events", []) or [])],
        )


def create_manifest(
    *,
    run_id: str,
    started_at: datetime,
    atlas_version: str,
    config_hash: str,
    token_set_hash: str,
    request: Optional[Dict[str, Any]] = None,
    options: Optional[Dict[str, Any]] = None,
) -> ExportManifest:
    """
    Cria o manifest inicial de uma exportação.

    `steps`, `documents` e `events` iniciam vazios: esta função não
    registra `run_started` nem qualquer outro evento.
    """
    return ExportManifest(
        run={
            "run_id": run_id,
            "started_at": _iso(started_at),
            "atlas_version": atlas_version,
        },
        inputs={
            "config_hash": config_hash,
            "token_set_hash": token_set_hash,
            "request": dict(request or {}),
            "options": dict(options or {}),
        },
    )


def add_event(
    manifest: ExportManifest,
    *,
    event_type: str,
    ts: datetime,
    step_id: Optional[str] = None,
    payload: Optional[Dict[str, Any]] = None,
) -> None:
    """Acrescenta um evento ao Event Log, na ordem de chamada."""
    event: Dict[str, Any] = {"event_type": event_type, "timestamp": _iso(ts)}
    if step_id is not None:
        event["step_id"] = step_id
    if payload is not None:
        event["payload"] = payload
    manifest.events.append(event)


def record_step_result(
    manifest: ExportManifest,
    result: "StepResult",
    *,
    ts: Optional[datetime] = None,
) -> None:
    """
    Registra o estado final de um Step e o evento correspondente.

    O evento é `step_failed` quando o resultado carrega `payload["error"]`,
    senão `step_finished`.
    """
    ts = ts or datetime.now(timezone.utc)
    status = result.status.value
    entry: Dict[str, Any] = {
        "step_id": result.step_id,
        "kind": result.kind.value,
        "status": status,
        "finished_at": _iso(ts),
        "summary": result.summary,
        "metrics": dict(result.metrics),
        "warnings": list(result.warnings),
        "artifacts": dict(result.artifacts),
    }
    error = result.payload.get("error")
    if error is not None:
        entry["error"] = error
    manifest.steps[result.step_id] = entry

    add_event(
        manifest,
        event_type="step_failed" if error is not None else "step_finished",
        ts=ts,
        step_id=result.step_id,
        payload={"status": status},
    )


def record_documents(manifest: ExportManifest, documents: Sequence["OutputDocument"]) -> None:
    """Substitui a seção `documents` pelos metadados dos documentos emitidos."""
    manifest.documents = [
        {
            "directory": doc.directory,
            "file_name": doc.file_name,
            "bytes": len(doc.content.encode("utf-8")),
            "sha256": doc.sha256(),
        }
        for doc in documents
    ]


def save_manifest(manifest: ExportManifest, path: Path) -> None:
    """Persiste o manifest em JSON determinístico (cria diretórios)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(manifest.to_dict(), ensure_ascii=False, indent=2, sort_keys=True),
        encoding="utf-8",
    )


def load_manifest(path: Path) -> ExportManifest:
    """
    Restaura um manifest persistido.

    Raises:
        OSError: Falha de leitura.
        json.JSONDecodeError: JSON inválido.
    """
    data = json.loads(path.read_text(encoding="utf-8"))
    return ExportManifest.from_dict(data)
