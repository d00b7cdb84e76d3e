# tests/conftest.py
"""
Fixtures compartilhados para testes do Atlas Tokens.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas (YAML e dict)
- working sets de tokens pequenos, montados em memória
- contexto de execução controlado (RunContext)
- Steps dummy para testes estruturais

Decisões arquiteturais:
    - Imports do core são lazy, para que falhas de import apareçam como
      erro do teste que depende delas (e não da coleta inteira)
    - Working sets são construídos com entidades reais, nunca mocks
    - Nenhuma fixture realiza I/O (arquivos ficam a cargo de `tmp_path`)

Limites explícitos:
    - Não executa pipeline real
    - Não substitui testes end-to-end (ver tests/e2e)
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante a um `atlas.defaults.yaml` real.

    Representa a base completa sobre a qual overrides locais são
    aplicados via deep-merge.
    """
    return """\
export:
  fileStructure: separateByType
  exportThemesAs: separateFiles
  exportBaseValues: true
  exportOnlyThemedTokens: false
  indent: 2
classification:
  componentNames: [button, card]
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML de override local: muda apenas o layout e a lista de componentes."""
    return """\
export:
  fileStructure: separateByCollection
classification:
  componentNames: [button, card, chip]
"""


@pytest.fixture
def dummy_config() -> dict:
    """Configuração já resolvida, mínima e válida para o pipeline."""
    return {
        "export": {
            "fileStructure": "singleFile",
            "exportThemesAs": "nestedThemes",
            "exportBaseValues": True,
            "exportOnlyThemedTokens": False,
            "indent": 2,
            "onPathCollision": "warn",
        },
        "classification": {},
    }


# =====================================================
# Pipeline fixtures (Step + RunContext)
# =====================================================

@pytest.fixture
def dummy_ctx(dummy_config):
    """
    RunContext determinístico (run_id e created_at fixos).

    Usado por testes de engine, Steps e manifest.
    """
    from atlas_tokens.core.pipeline.context import RunContext

    return RunContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


@pytest.fixture
def DummyStep():
    """
    Fixture factory: devolve a *classe* de um Step mínimo (duck typing).

    O Step dummy sempre retorna SUCCESS e grava o artefato `<id>.ok`.
    """
    from atlas_tokens.core.pipeline.types import StepKind, StepResult, StepStatus

    class _DummyStep:
        def __init__(self, step_id: str = "inputs.resolve", kind: StepKind = StepKind.RESOLVE, depends_on=None):
            self.id = step_id
            self.kind = kind
            self.depends_on = depends_on or []

        def run(self, ctx):
            ctx.set_artifact(f"{self.id}.ok", True)
            return StepResult(
                step_id=self.id,
                kind=self.kind,
                status=StepStatus.SUCCESS,
                summary="dummy ok",
                artifacts={"ok": f"{self.id}.ok"},
                payload={"note": "dummy"},
            )

    return _DummyStep


# =====================================================
# Token set fixtures
# =====================================================

@pytest.fixture
def color_token_set():
    """
    Working set mínimo com um grupo `color` e o token `primary` (#000000).

    Um único tema `Dark` sobrescreve `color.primary` para #FFFFFF; um
    segundo token (`secondary`) nunca é tematizado.
    """
    from atlas_tokens.core.model.entities import (
        Theme,
        ThemeOverride,
        Token,
        TokenCollection,
        TokenGroup,
        TokenSet,
    )

    return TokenSet(
        tokens=(
            Token(id="t-primary", name="primary", type="color", value="#000000",
                  parent_group_id="g-color", collection_id="c-colors"),
            Token(id="t-secondary", name="secondary", type="color", value="#333333",
                  parent_group_id="g-color", collection_id="c-colors"),
            Token(id="t-body", name="body", type="typography", value={"fontSize": 16},
                  parent_group_id="g-text", collection_id="c-colors"),
        ),
        groups=(
            TokenGroup(id="g-color", name="color"),
            TokenGroup(id="g-text", name="text"),
        ),
        collections=(TokenCollection(id="c-colors", name="Colors"),),
        themes=(
            Theme(id="th-dark", name="Dark", version_id="v-dark",
                  overrides=(ThemeOverride(token_id="t-primary", value="#FFFFFF"),)),
        ),
    )


@pytest.fixture
def collection_token_set():
    """
    Working set com coleções Global, Alias, Components e uma coleção de brand.

    - Global: `blue` (#0000FF)
    - Alias: `accent` referencia `blue`
    - Components: grupo `Button` > `Primary` com `background` e `label`
    - Brand (`brand-acme`): `logo`
    - Temas: `Light` e `Dark`, ambos sobrescrevem `background`
    """
    from atlas_tokens.core.model.entities import (
        Brand,
        Theme,
        ThemeOverride,
        Token,
        TokenCollection,
        TokenGroup,
        TokenSet,
    )

    return TokenSet(
        tokens=(
            Token(id="t-blue", name="blue", type="color", value="#0000FF",
                  parent_group_id="g-palette", collection_id="c-global", brand_id="b-acme"),
            Token(id="t-accent", name="accent", type="color", value="#0000FF",
                  parent_group_id="g-semantic", collection_id="c-alias", brand_id="b-acme",
                  alias_of="t-blue"),
            Token(id="t-bg", name="background", type="color", value="#FFFFFF",
                  parent_group_id="g-button-primary", collection_id="c-components", brand_id="b-acme"),
            Token(id="t-label", name="label", type="color", value="#111111",
                  parent_group_id="g-button-primary", collection_id="c-components", brand_id="b-acme"),
            Token(id="t-logo", name="logo", type="string", value="acme.svg",
                  parent_group_id="g-assets", collection_id="c-brand", brand_id="b-acme"),
        ),
        groups=(
            TokenGroup(id="g-palette", name="palette", brand_id="b-acme"),
            TokenGroup(id="g-semantic", name="semantic", brand_id="b-acme"),
            TokenGroup(id="g-button", name="Button", brand_id="b-acme"),
            TokenGroup(id="g-button-primary", name="Primary", parent_id="g-button", brand_id="b-acme"),
            TokenGroup(id="g-assets", name="assets", brand_id="b-acme"),
        ),
        collections=(
            TokenCollection(id="c-global", name="Global"),
            TokenCollection(id="c-alias", name="Alias"),
            TokenCollection(id="c-components", name="Components"),
            TokenCollection(id="c-brand", name="brand-acme"),
        ),
        themes=(
            Theme(id="th-light", name="Light",
                  overrides=(ThemeOverride(token_id="t-bg", value="#FAFAFA"),)),
            Theme(id="th-dark", name="Dark",
                  overrides=(ThemeOverride(token_id="t-bg", value="#000000"),)),
        ),
        brands=(Brand(id="b-acme", name="Acme", version_id="v-acme"),),
    )
