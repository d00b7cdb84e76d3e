# src/atlas_tokens/core/config/options.py
"""
Opções canônicas de exportação do Atlas Tokens.

Este módulo materializa a seção `export` da configuração efetiva em uma
estrutura imutável e validada (`ExportOptions`), consumida pelo composer.

Eixos de decisão:
    - FileStructure     → um arquivo, um por tipo de token, um por coleção
    - ThemeExportStyle  → como overlays de tema são combinados com a base

Chaves reconhecidas (seção `export`):
    fileStructure:          singleFile | separateByType | separateByCollection
    exportThemesAs:         none | nestedThemes | separateFiles | mergedTheme | applyDirectly
    exportBaseValues:       bool
    exportOnlyThemedTokens: bool
    indent:                 int >= 0 | string composta apenas por espaços em branco
    onPathCollision:        warn | error

Invariantes:
    - `ExportOptions` é imutável
    - Valores inválidos levantam `InvalidExportOptionError` (fatal)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping, Type, TypeVar, Union

from .errors import InvalidExportOptionError


class FileStructure(str, Enum):
    """Layout dos documentos de saída."""

    SINGLE_FILE = "singleFile"
    SEPARATE_BY_TYPE = "separateByType"
    SEPARATE_BY_COLLECTION = "separateByCollection"


class ThemeExportStyle(str, Enum):
    """
    Estilo de exportação de temas.

    Valores:
        - NONE: temas solicitados são ignorados
        - NESTED_THEMES: valores de tema aninhados no documento base
        - SEPARATE_FILES: um documento independente por tema
        - MERGED_THEME: todos os temas aplicados em sequência, um documento extra
        - APPLY_DIRECTLY: temas aplicados sobre a base, sem documentos por tema
    """

    NONE = "none"
    NESTED_THEMES = "nestedThemes"
    SEPARATE_FILES = "separateFiles"
    MERGED_THEME = "mergedTheme"
    APPLY_DIRECTLY = "applyDirectly"


class PathCollisionPolicy(str, Enum):
    """Reação a documentos com o mesmo destino (diretório + arquivo)."""

    WARN = "warn"
    ERROR = "error"


Indent = Union[int, str]

_E = TypeVar("_E", bound=Enum)


@dataclass(frozen=True)
class ExportOptions:
    """
    Opções efetivas de uma exportação.

    Campos:
        - file_structure: eixo de layout de arquivos
        - export_themes_as: eixo de estilo de exportação de temas
        - export_base_values: emite documentos com valores sem tema
        - export_only_themed_tokens: documentos de tema contêm apenas tokens
          efetivamente alterados pelo tema (partições vazias são puladas)
        - indent: indentação repassada à serialização JSON
        - on_path_collision: política de colisão de destino
    """

    file_structure: FileStructure = FileStructure.SEPARATE_BY_TYPE
    export_themes_as: ThemeExportStyle = ThemeExportStyle.SEPARATE_FILES
    export_base_values: bool = True
    export_only_themed_tokens: bool = False
    indent: Indent = 2
    on_path_collision: PathCollisionPolicy = PathCollisionPolicy.WARN

    def to_dict(self) -> Dict[str, Any]:
        return {
            "fileStructure": self.file_structure.value,
            "exportThemesAs": self.export_themes_as.value,
            "exportBaseValues": self.export_base_values,
            "exportOnlyThemedTokens": self.export_only_themed_tokens,
            "indent": self.indent,
            "onPathCollision": self.on_path_collision.value,
        }


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise InvalidExportOptionError(msg)


def _enum_value(section: Mapping[str, Any], key: str, enum_cls: Type[_E], default: _E) -> _E:
    raw = section.get(key, default.value)
    if isinstance(raw, enum_cls):
        return raw
    allowed = [m.value for m in enum_cls]
    _expect(raw in allowed, f"export.{key} must be one of {allowed}, got {raw!r}")
    return enum_cls(raw)


def _bool_value(section: Mapping[str, Any], key: str, default: bool) -> bool:
    raw = section.get(key, default)
    _expect(isinstance(raw, bool), f"export.{key} must be a bool, got {raw!r}")
    return raw


def _indent_value(section: Mapping[str, Any], default: Indent) -> Indent:
    raw = section.get("indent", default)
    # bool é subclasse de int
    if isinstance(raw, int) and not isinstance(raw, bool):
        _expect(raw >= 0, f"export.indent must be >= 0, got {raw}")
        return raw
    if isinstance(raw, str):
        _expect(raw == "" or raw.isspace(), "export.indent string must contain only whitespace")
        return raw
    raise InvalidExportOptionError(f"export.indent must be an int or a whitespace string, got {raw!r}")


def parse_export_options(config: Mapping[str, Any]) -> ExportOptions:
    """
    Valida e materializa a seção `export` da configuração efetiva.

    Chaves ausentes assumem os defaults de `ExportOptions`.

    Args:
        config (Mapping[str, Any]): Configuração efetiva (ver `load_config`).

    Returns:
        ExportOptions: Opções imutáveis e validadas.

    Raises:
        InvalidExportOptionError: Se alguma opção tiver valor inválido.
    """
    section = config.get("export") or {}
    _expect(isinstance(section, Mapping), "export section must be a mapping")

    defaults = ExportOptions()
    return ExportOptions(
        file_structure=_enum_value(section, "fileStructure", FileStructure, defaults.file_structure),
        export_themes_as=_enum_value(section, "exportThemesAs", ThemeExportStyle, defaults.export_themes_as),
        export_base_values=_bool_value(section, "exportBaseValues", defaults.export_base_values),
        export_only_themed_tokens=_bool_value(
            section, "exportOnlyThemedTokens", defaults.export_only_themed_tokens
        ),
        indent=_indent_value(section, defaults.indent),
        on_path_collision=_enum_value(
            section, "onPathCollision", PathCollisionPolicy, defaults.on_path_collision
        ),
    )
