# src/atlas_tokens/core/config/__init__.py

"""
Camada de configuração do Atlas Tokens.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, validar e identificar a configuração de uma exportação.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Deep-merge determinístico (também usado na composição de documentos)
    - Validação das opções de exportação (`ExportOptions`)
    - Geração de hash canônico para rastreabilidade

Limites explícitos:
    - Não contém lógica de composição de documentos
    - Não depende de engine ou steps
"""

from .errors import (
    ConfigError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidExportOptionError,
    MergeInputError,
    UnsupportedConfigFormatError,
)
from .hashing import canonical_json, compute_config_hash
from .loader import DEFAULT_CONFIG, load_config
from .merge import deep_merge, merge_all
from .options import (
    ExportOptions,
    FileStructure,
    PathCollisionPolicy,
    ThemeExportStyle,
    parse_export_options,
)

__all__ = [
    "ConfigError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidExportOptionError",
    "MergeInputError",
    "UnsupportedConfigFormatError",
    "canonical_json",
    "compute_config_hash",
    "DEFAULT_CONFIG",
    "load_config",
    "deep_merge",
    "merge_all",
    "ExportOptions",
    "FileStructure",
    "PathCollisionPolicy",
    "ThemeExportStyle",
    "parse_export_options",
]
