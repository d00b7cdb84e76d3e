"""
Registros de documento produzidos pela composição.

- DocumentTree   → documento em composição (árvore ainda não serializada)
- OutputDocument → documento final (conteúdo JSON serializado)

Ambos compartilham a identidade de destino `(directory, file_name)`,
usada pela deduplicação. Campos são obrigatórios e explícitos: o nome do
arquivo nunca é derivado de outro campo.
"""

from __future__ import annotations

import hashlib
import json
from dataclasses import dataclass
from typing import Any, Dict, List, Tuple, Union

Identity = Tuple[str, str]


@dataclass(frozen=True)
class DocumentTree:
    directory: str
    file_name: str
    tree: Dict[str, Any]

    @property
    def identity(self) -> Identity:
        return (self.directory, self.file_name)

    def render(self, indent: Union[int, str] = 2) -> "OutputDocument":
        """Serializa a árvore preservando a ordem de inserção das chaves."""
        content = json.dumps(self.tree, indent=indent, ensure_ascii=False)
        return OutputDocument(directory=self.directory, file_name=self.file_name, content=content)


@dataclass(frozen=True)
class OutputDocument:
    directory: str
    file_name: str
    content: str

    @property
    def identity(self) -> Identity:
        return (self.directory, self.file_name)

    @property
    def path(self) -> str:
        return f"{self.directory.rstrip('/')}/{self.file_name}"

    def sha256(self) -> str:
        return hashlib.sha256(self.content.encode("utf-8")).hexdigest()

    def to_dict(self) -> Dict[str, Any]:
        return {"directory": self.directory, "file_name": self.file_name, "content": self.content}


@dataclass(frozen=True)
class Composition:
    """Resultado do composer: documentos em ordem de geração + avisos não fatais."""

    documents: Tuple[DocumentTree, ...]
    warnings: Tuple[str, ...] = ()

    def identities(self) -> List[Identity]:
        return [d.identity for d in self.documents]
