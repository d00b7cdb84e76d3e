"""Erros canônicos do domínio de TokenSet (Atlas Tokens).

O snapshot de tokens é a entrada de dados da exportação.
Falhas de carregamento/validação devem produzir erros explícitos e estáveis.
"""


class TokenSetError(Exception):
    """Erro base do domínio de TokenSet."""


class TokenSetFileNotFoundError(TokenSetError):
    """Arquivo de snapshot não existe no caminho informado."""


class UnsupportedTokenSetFormatError(TokenSetError):
    """Formato de snapshot não suportado (v1: YAML/JSON)."""


class TokenSetParseError(TokenSetError):
    """Falha ao parsear YAML/JSON."""


class TokenSetValidationError(TokenSetError):
    """Snapshot não é estruturalmente válido (ex.: ids de token duplicados)."""
