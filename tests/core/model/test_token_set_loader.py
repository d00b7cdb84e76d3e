# tests/core/model/test_token_set_loader.py
"""
Testes do loader de snapshots de tokens.

Valida:
- leitura de YAML e JSON para entidades imutáveis, na ordem de entrada
- rejeição de ids de token duplicados
- erros tipados para arquivo ausente, extensão e parsing
- materialização via provider (`TokenSet.from_provider`)
- hash estável do working set
"""

import json

import pytest

try:
    from atlas_tokens.core.model import (
        SnapshotTokenProvider,
        TokenProvider,
        TokenSet,
        TokenSetFileNotFoundError,
        TokenSetParseError,
        TokenSetValidationError,
        UnsupportedTokenSetFormatError,
        compute_token_set_hash,
        load_token_set,
        validate_token_set,
    )
except Exception as e:  # noqa: BLE001
    load_token_set = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    if _IMPORT_ERR is not None:
        pytest.fail(f"Failed to import token set model. Import error: {_IMPORT_ERR}")


SNAPSHOT_YAML = """\
tokens:
  - id: t1
    name: primary
    type: color
    value: "#000000"
    group_id: g1
    collection_id: c1
  - id: t2
    name: accent
    type: color
    value: "#000000"
    alias_of: t1
    group_id: g1
    collection_id: c1
groups:
  - id: g1
    name: color
collections:
  - id: c1
    name: Global
themes:
  - id: th1
    name: Dark
    version_id: v-dark
    overrides:
      - token_id: t1
        value: "#FFFFFF"
brands:
  - id: b1
    name: Acme
"""


def test_load_yaml_snapshot(tmp_path):
    """
    Snapshot YAML vira um TokenSet com entidades tipadas.

    Invariantes:
        - A ordem dos tokens é a ordem do arquivo
        - `group_id` do snapshot vira `parent_group_id`
        - Overrides de tema são tuplas de `ThemeOverride`
    """
    _require_imports()
    path = tmp_path / "tokens.yaml"
    path.write_text(SNAPSHOT_YAML, encoding="utf-8")

    ts = load_token_set(path)

    assert [t.id for t in ts.tokens] == ["t1", "t2"]
    assert ts.tokens[0].parent_group_id == "g1"
    assert ts.tokens[1].alias_of == "t1"
    assert ts.themes[0].overrides[0].value == "#FFFFFF"
    assert ts.themes[0].matches("v-dark")
    assert ts.brands[0].name == "Acme"


def test_load_json_snapshot(tmp_path):
    _require_imports()
    path = tmp_path / "tokens.json"
    path.write_text(json.dumps({"tokens": [{"id": "a", "name": "a", "type": "size", "value": 4}]}), encoding="utf-8")
    ts = load_token_set(str(path))
    assert ts.tokens[0].value == 4
    assert ts.groups == ()


def test_duplicate_token_ids_are_rejected():
    _require_imports()
    data = {
        "tokens": [
            {"id": "a", "name": "a", "type": "size", "value": 1},
            {"id": "a", "name": "b", "type": "size", "value": 2},
        ]
    }
    with pytest.raises(TokenSetValidationError, match="duplicate token id"):
        validate_token_set(data)


@pytest.mark.parametrize(
    "data",
    [
        ["not", "a", "mapping"],
        {"tokens": {"id": "a"}},
        {"tokens": [{"name": "no-id", "type": "size", "value": 1}]},
        {"tokens": [{"id": "a", "name": "a", "value": 1}]},
        {"themes": [{"id": "th", "name": "T", "overrides": [{"value": 1}]}]},
    ],
)
def test_structural_validation_errors(data):
    _require_imports()
    with pytest.raises(TokenSetValidationError):
        validate_token_set(data)


def test_loader_file_errors(tmp_path):
    _require_imports()
    with pytest.raises(TokenSetFileNotFoundError):
        load_token_set(tmp_path / "missing.yaml")

    csv_path = tmp_path / "tokens.csv"
    csv_path.write_text("id,name\n", encoding="utf-8")
    with pytest.raises(UnsupportedTokenSetFormatError):
        load_token_set(csv_path)

    broken = tmp_path / "tokens.json"
    broken.write_text("{not json", encoding="utf-8")
    with pytest.raises(TokenSetParseError):
        load_token_set(broken)

    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    with pytest.raises(TokenSetParseError):
        load_token_set(empty)


def test_from_provider_round_trip(color_token_set):
    _require_imports()
    provider = SnapshotTokenProvider(color_token_set)
    assert isinstance(provider, TokenProvider)
    assert TokenSet.from_provider(provider) == color_token_set


def test_token_set_hash_is_stable(color_token_set):
    _require_imports()
    assert compute_token_set_hash(color_token_set) == compute_token_set_hash(
        TokenSet.from_provider(SnapshotTokenProvider(color_token_set))
    )
    assert compute_token_set_hash(color_token_set) != compute_token_set_hash(TokenSet())
