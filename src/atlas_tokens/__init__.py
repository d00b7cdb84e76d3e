# src/atlas_tokens/__init__.py
"""
Atlas Tokens — composição determinística de documentos de design tokens.

Este pacote transforma um working set de design tokens (tokens, grupos,
coleções, temas, brands) e um conjunto de opções de exportação em uma
lista ordenada de documentos JSON.

Arquitetura em alto nível:
    - core.config       → carregamento, deep-merge, hashing e opções de exportação
    - core.model        → entidades imutáveis, snapshots e provider
    - core.classify     → classificação de coleções e grupos de componente
    - core.overlay      → aplicação sequencial de temas
    - core.tree         → formatação de tokens em árvore
    - core.compose      → tabela de decisão, deduplicação e documentos
    - core.pipeline     → protocolos de Step, RunContext e registry
    - core.engine       → planejamento (DAG) e execução fail-fast
    - core.traceability → manifest e Event Log da exportação
    - api               → `run_export` / `ExportRun`

Limites explícitos:
    - Não busca tokens em serviços remotos
    - Não escreve documentos em disco
    - Não formata valores por tipo de token (payload opaco)
"""

__version__ = "0.1.0"

from .api import ExportRun, default_steps, run_export  # noqa: E402
from .core.compose import compose_documents  # noqa: E402

__all__ = ["__version__", "ExportRun", "default_steps", "run_export", "compose_documents"]
