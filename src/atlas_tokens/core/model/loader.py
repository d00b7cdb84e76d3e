"""Loader canônico de snapshots de tokens (YAML/JSON).

Um snapshot é a forma materializada do que o token provider remoto
entregaria para uma versão do design system:

    tokens:       [{id, name, type, value, description?, group_id?,
                    collection_id?, brand_id?, alias_of?}]
    groups:       [{id, name, parent_id?, brand_id?}]
    collections:  [{id, name}]
    themes:       [{id, name, version_id?, overrides: [{token_id, value?, alias_of?}]}]
    brands:       [{id, name, version_id?}]

Notas:
- O formato é inferido pela extensão do arquivo.
- Validação é estrutural apenas: valores de token são opacos.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from .entities import Brand, Theme, ThemeOverride, Token, TokenCollection, TokenGroup, TokenSet
from .errors import (
    TokenSetFileNotFoundError,
    TokenSetParseError,
    TokenSetValidationError,
    UnsupportedTokenSetFormatError,
)


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise TokenSetValidationError(msg)


def _optional_str(item: Dict[str, Any], key: str, where: str) -> Optional[str]:
    value = item.get(key)
    if value is None:
        return None
    _expect(isinstance(value, str), f"{where}.{key} must be a string")
    return value


def _section(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    items = data.get(key) or []
    _expect(isinstance(items, list), f"{key} must be a list")
    for i, item in enumerate(items):
        _expect(isinstance(item, dict), f"{key}[{i}] must be a mapping")
        _expect(_is_non_empty_str(item.get("id")), f"{key}[{i}].id is required")
        _expect(isinstance(item.get("name"), str), f"{key}[{i}].name is required")
    return items


def validate_token_set(data: Any) -> TokenSet:
    """Valida e materializa um TokenSet a partir do snapshot bruto."""
    _expect(isinstance(data, dict), "token set must be a mapping/dict")

    tokens: List[Token] = []
    seen_ids: set[str] = set()
    for i, t in enumerate(_section(data, "tokens")):
        where = f"tokens[{i}]"
        _expect(t["id"] not in seen_ids, f"duplicate token id: {t['id']}")
        seen_ids.add(t["id"])
        _expect(_is_non_empty_str(t.get("type")), f"{where}.type is required")
        _expect("value" in t or t.get("alias_of"), f"{where}.value is required")
        tokens.append(
            Token(
                id=t["id"],
                name=t["name"],
                type=t["type"],
                value=t.get("value"),
                description=_optional_str(t, "description", where),
                parent_group_id=_optional_str(t, "group_id", where),
                collection_id=_optional_str(t, "collection_id", where),
                brand_id=_optional_str(t, "brand_id", where),
                alias_of=_optional_str(t, "alias_of", where),
            )
        )

    groups = [
        TokenGroup(
            id=g["id"],
            name=g["name"],
            parent_id=_optional_str(g, "parent_id", f"groups[{i}]"),
            brand_id=_optional_str(g, "brand_id", f"groups[{i}]"),
        )
        for i, g in enumerate(_section(data, "groups"))
    ]

    collections = [TokenCollection(id=c["id"], name=c["name"]) for c in _section(data, "collections")]

    themes: List[Theme] = []
    for i, th in enumerate(_section(data, "themes")):
        raw_overrides = th.get("overrides") or []
        _expect(isinstance(raw_overrides, list), f"themes[{i}].overrides must be a list")
        overrides = []
        for j, o in enumerate(raw_overrides):
            where = f"themes[{i}].overrides[{j}]"
            _expect(isinstance(o, dict), f"{where} must be a mapping")
            _expect(_is_non_empty_str(o.get("token_id")), f"{where}.token_id is required")
            overrides.append(
                ThemeOverride(
                    token_id=o["token_id"],
                    value=o.get("value"),
                    alias_of=_optional_str(o, "alias_of", where),
                )
            )
        themes.append(
            Theme(
                id=th["id"],
                name=th["name"],
                overrides=tuple(overrides),
                version_id=_optional_str(th, "version_id", f"themes[{i}]"),
            )
        )

    brands = [
        Brand(id=b["id"], name=b["name"], version_id=_optional_str(b, "version_id", f"brands[{i}]"))
        for i, b in enumerate(_section(data, "brands"))
    ]

    return TokenSet(
        tokens=tuple(tokens),
        groups=tuple(groups),
        collections=tuple(collections),
        themes=tuple(themes),
        brands=tuple(brands),
    )


def load_token_set(path: Union[str, Path]) -> TokenSet:
    """Carrega um snapshot de tokens a partir de YAML/JSON.

    Raises:
        TokenSetFileNotFoundError: se arquivo não existir.
        UnsupportedTokenSetFormatError: se extensão não suportada.
        TokenSetParseError: se parsing falhar ou o arquivo estiver vazio.
        TokenSetValidationError: se a estrutura for inválida.
    """
    p = Path(path)
    if not p.exists():
        raise TokenSetFileNotFoundError(f"token set file not found: {p}")

    suffix = p.suffix.lower()
    raw = p.read_text(encoding="utf-8")

    try:
        if suffix in {".yml", ".yaml"}:
            data = yaml.safe_load(raw)
        elif suffix == ".json":
            data = json.loads(raw)
        else:
            raise UnsupportedTokenSetFormatError(f"unsupported token set format: {suffix}")
    except UnsupportedTokenSetFormatError:
        raise
    except Exception as e:
        raise TokenSetParseError(str(e) or "failed to parse token set") from e

    if data is None:
        raise TokenSetParseError("token set file is empty")

    return validate_token_set(data)
