"""
Atlas Tokens — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Atlas Tokens.
Erros são considerados artefatos da run e fazem parte do contrato operacional
do sistema, devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Nenhuma saída parcial é produzida quando um erro fatal é registrado.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, List, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AtlasErrorPayload:
    """
    Payload canônico de erro do Atlas Tokens.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Configuração da exportação
THEME_NOT_FOUND = "THEME_NOT_FOUND"
BRAND_NOT_FOUND = "BRAND_NOT_FOUND"

# Documentos
DOCUMENT_PATH_COLLISION = "DOCUMENT_PATH_COLLISION"

# Engine / Execução
ENGINE_EXECUTION_ERROR = "ENGINE_EXECUTION_ERROR"
ENGINE_CONFIGURATION_ERROR = "ENGINE_CONFIGURATION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def theme_not_found(
    *,
    theme_id: str,
    known_theme_ids: List[str],
    hint: str = "Solicite apenas temas existentes na versão exportada (id ou version_id).",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=THEME_NOT_FOUND,
        message=f"Tema não encontrado: {theme_id}",
        details={
            "theme_id": theme_id,
            "known_theme_ids": known_theme_ids,
        },
        hint=hint,
    )


def brand_not_found(
    *,
    brand_id: str,
    known_brand_ids: List[str],
    hint: str = "Informe uma brand existente na versão exportada (id ou version_id).",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=BRAND_NOT_FOUND,
        message=f"Brand não encontrada: {brand_id}",
        details={
            "brand_id": brand_id,
            "known_brand_ids": known_brand_ids,
        },
        hint=hint,
    )


def document_path_collision(
    *,
    directory: str,
    file_name: str,
    dropped: int,
    hint: str = "Renomeie grupos ou coleções que colapsam no mesmo nome de arquivo, ou use onPathCollision: warn.",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=DOCUMENT_PATH_COLLISION,
        message=f"Destino duplicado: {directory}/{file_name}",
        details={
            "directory": directory,
            "file_name": file_name,
            "dropped": dropped,
        },
        hint=hint,
    )


def engine_execution_error(
    *,
    step: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique os eventos da run para diagnosticar a falha. Nenhum documento parcial é emitido.",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=ENGINE_EXECUTION_ERROR,
        message="Falha inesperada durante a exportação",
        details={
            "step": step,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )


def engine_configuration_error(
    *,
    message: str = "Configuração inválida para a exportação",
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Revise a seção `export` da configuração antes de reexecutar.",
) -> AtlasErrorPayload:
    return AtlasErrorPayload(
        type=ENGINE_CONFIGURATION_ERROR,
        message=message,
        details=details or {},
        hint=hint,
    )
