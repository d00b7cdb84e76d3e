"""
Atlas Tokens — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Atlas Tokens.

Objetivo:
- Permitir que composer/steps levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para AtlasErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Exceções devem carregar apenas dados estruturados (serializáveis).
- Erros de configuração abortam a exportação inteira (sem saída parcial).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class AtlasException(Exception):
    """Base class para exceções internas do Atlas.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Configuração da exportação
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ThemeNotFoundError(AtlasException):
    """Tema solicitado não existe no conjunto de tokens carregado."""


@dataclass(frozen=True)
class BrandNotFoundError(AtlasException):
    """Brand solicitada não existe no conjunto de tokens carregado."""


# ---------------------------------------------------------------------------
# Documentos de saída
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class DocumentPathCollisionError(AtlasException):
    """Dois documentos gerados disputam o mesmo destino (modo estrito)."""


# ---------------------------------------------------------------------------
# Engine / Execução
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class MissingArtifactError(AtlasException):
    """Step depende de um artefato que nenhum Step anterior produziu."""


@dataclass(frozen=True)
class ExportFailedError(AtlasException):
    """Exportação abortada; `details` carrega o AtlasErrorPayload do Step."""
