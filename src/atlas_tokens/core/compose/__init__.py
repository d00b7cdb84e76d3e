"""
Composição de documentos (Atlas Tokens).

- builders  → particionamento e convenções de caminho
- composer  → tabela de decisão (estrutura de arquivos × estilo de tema)
- dedupe    → deduplicação por destino com relatório de colisões
- documents → registros `DocumentTree` / `OutputDocument`
"""

from .composer import ComposedExport, DocumentComposer, compose_documents, resolve_inputs
from .dedupe import DedupeReport, PathCollision, dedupe_documents
from .documents import Composition, DocumentTree, OutputDocument

__all__ = [
    "ComposedExport",
    "DocumentComposer",
    "compose_documents",
    "resolve_inputs",
    "DedupeReport",
    "PathCollision",
    "dedupe_documents",
    "Composition",
    "DocumentTree",
    "OutputDocument",
]
