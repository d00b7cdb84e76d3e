"""
Deduplicação de documentos por destino.

Identidade de um documento = (directory, file_name). A varredura segue
a ordem de geração e mantém apenas o primeiro documento de cada
identidade.

Colisões não são descartadas em silêncio: cada identidade repetida gera
um `PathCollision` no relatório. Com `PathCollisionPolicy.ERROR` a
primeira identidade repetida aborta com `DocumentPathCollisionError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, List, Sequence, Tuple, TypeVar

from atlas_tokens.core.config.options import PathCollisionPolicy
from atlas_tokens.core.errors import document_path_collision
from atlas_tokens.core.exceptions import DocumentPathCollisionError

from .documents import Identity

D = TypeVar("D")


@dataclass(frozen=True)
class PathCollision:
    directory: str
    file_name: str
    dropped: int

    def describe(self) -> str:
        return f"{self.dropped} document(s) dropped for duplicate path {self.directory}/{self.file_name}"

    def to_dict(self) -> Dict[str, object]:
        return {"directory": self.directory, "file_name": self.file_name, "dropped": self.dropped}


@dataclass(frozen=True)
class DedupeReport(Generic[D]):
    documents: Tuple[D, ...]
    collisions: Tuple[PathCollision, ...] = ()


def dedupe_documents(
    documents: Sequence[D],
    *,
    policy: PathCollisionPolicy = PathCollisionPolicy.WARN,
) -> DedupeReport[D]:
    """
    Mantém o primeiro documento por identidade, na ordem de geração.

    Aceita qualquer documento com a propriedade `identity`
    (`DocumentTree` ou `OutputDocument`).

    Raises:
        DocumentPathCollisionError: Em modo estrito, na primeira colisão.
    """
    kept: List[D] = []
    dropped: Dict[Identity, int] = {}
    seen = set()
    for doc in documents:
        identity = doc.identity  # type: ignore[attr-defined]
        if identity in seen:
            dropped[identity] = dropped.get(identity, 0) + 1
            continue
        seen.add(identity)
        kept.append(doc)

    collisions = tuple(
        PathCollision(directory=directory, file_name=file_name, dropped=count)
        for (directory, file_name), count in dropped.items()
    )

    if collisions and policy is PathCollisionPolicy.ERROR:
        first = collisions[0]
        payload = document_path_collision(
            directory=first.directory,
            file_name=first.file_name,
            dropped=first.dropped,
        )
        raise DocumentPathCollisionError(payload.message, payload.details, payload.hint)

    return DedupeReport(documents=tuple(kept), collisions=collisions)
