# src/atlas_tokens/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Atlas Tokens.

Este módulo define a hierarquia oficial de exceções utilizadas durante
o carregamento, o merge e a validação estrutural das opções de exportação.

As exceções aqui definidas representam **erros de configuração**:
uma exportação com configuração inválida nunca produz documentos parciais.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de dados de tokens

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende de composer, engine ou steps
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Atlas Tokens.

    Todas as exceções levantadas durante carregamento, merge e validação
    das opções de exportação devem herdar desta classe.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando o arquivo de defaults informado
    não existe no caminho especificado.

    Decisões arquiteturais:
        - Um defaults explicitamente informado é obrigatório
        - Não há fallback silencioso para os defaults embutidos
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class MergeInputError(ConfigError):
    """
    Exceção levantada quando `deep_merge` recebe entradas que não são
    mapeamentos no nível raiz.

    Conflitos de valores folha **não** são erros (o segundo argumento
    vence); esta exceção sinaliza apenas uso incorreto da API.
    """


class InvalidExportOptionError(ConfigError):
    """
    Exceção levantada quando uma opção de exportação possui valor inválido.

    Exemplos:
        - fileStructure: "byFolder"       (valor fora do domínio)
        - exportBaseValues: "yes"         (não booleano)
        - indent: -2                      (inteiro negativo)
    """
