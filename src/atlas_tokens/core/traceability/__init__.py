"""
Rastreabilidade do Atlas Tokens (manifest de exportação).

API pública:
    - ExportManifest     → estrutura do manifest
    - create_manifest    → criação explícita (sem eventos implícitos)
    - add_event          → Event Log ordenado
    - record_step_result → estado final de um Step
    - record_documents   → destino, tamanho e SHA-256 dos documentos
    - save_manifest / load_manifest → persistência JSON com round-trip
"""

from .manifest import (
    ExportManifest,
    add_event,
    create_manifest,
    load_manifest,
    record_documents,
    record_step_result,
    save_manifest,
)

__all__ = [
    "ExportManifest",
    "add_event",
    "create_manifest",
    "load_manifest",
    "record_documents",
    "record_step_result",
    "save_manifest",
]
