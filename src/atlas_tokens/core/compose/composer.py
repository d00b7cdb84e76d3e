"""
Composer de documentos do Atlas Tokens.

O composer é uma tabela de decisão sobre dois eixos de configuração
(`FileStructure` × `ThemeExportStyle`) e três chaves (`export_base_values`,
`export_only_themed_tokens`, `indent`). Para cada combinação ele decide
quais documentos existem, em qual diretório, e como valores base e de
tema são combinados.

Fluxo:
    1. applyDirectly: os temas são aplicados sobre o set completo e a
       geração segue como se nenhum tema tivesse sido pedido
    2. Particionamento (arquivo único, por tipo ou por coleção)
    3. Geração por estilo de tema:
        - none          → documentos base (se habilitados)
        - nestedThemes  → base + árvore de cada tema, em deep-merge
        - separateFiles → base + um documento independente por tema
        - mergedTheme   → base + um documento com todos os temas aplicados

Decisões arquiteturais:
    - A supressão de valores base em sub-chamadas tematizadas é um
      argumento explícito (`export_base_values=False`) passado ao
      formatter, nunca estado compartilhado
    - Formatter, overlay e política de classificação são injetáveis
    - Lacunas de integridade (grupo/coleção não resolvidos) viram avisos

Invariantes:
    - Mesmas entradas → mesma lista de documentos, na mesma ordem
    - Coleções global/alias geram exatamente um documento na raiz e nunca
      entram em partições de tema
    - Tema ou brand desconhecidos abortam antes de qualquer documento

Limites explícitos:
    - Não deduplica destinos (ver `dedupe`)
    - Não escreve arquivos
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Tuple

from atlas_tokens.core.classify.hierarchy import Category
from atlas_tokens.core.classify.policy import DEFAULT_POLICY, ClassificationPolicy
from atlas_tokens.core.config.merge import merge_all
from atlas_tokens.core.config.options import ExportOptions, FileStructure, ThemeExportStyle
from atlas_tokens.core.errors import brand_not_found, theme_not_found
from atlas_tokens.core.exceptions import BrandNotFoundError, ThemeNotFoundError
from atlas_tokens.core.model.entities import (
    ExportRequest,
    ExportScope,
    Theme,
    Token,
    TokenGroup,
    TokenSet,
)
from atlas_tokens.core.overlay.themes import SequentialThemeOverlay, ThemeOverlay, changed_token_ids
from atlas_tokens.core.tree.formatter import NestedTreeFormatter, TreeFormatter

from .builders import (
    BRAND_DIR,
    THEMED_DIR,
    Partition,
    component_partitions,
    json_name,
    partitions_by_collection,
    partitions_by_type,
    single_partition,
    theme_brand_dir,
    theme_camel_dir,
    theme_key,
    theme_label,
)
from .dedupe import PathCollision, dedupe_documents
from .documents import Composition, DocumentTree, OutputDocument


# ---------------------------------------------------------------------------
# Resolução de entradas
# ---------------------------------------------------------------------------

def resolve_inputs(token_set: TokenSet, request: Optional[ExportRequest] = None) -> ExportScope:
    """
    Resolve brand e temas solicitados contra o working set.

    - Brand (por `id` ou `version_id`): restringe tokens e grupos à brand
    - Temas (por `id` ou `version_id`): na ordem do pedido

    Raises:
        BrandNotFoundError: Brand solicitada inexistente.
        ThemeNotFoundError: Algum tema solicitado inexistente.
    """
    request = request or ExportRequest()

    brand = None
    tokens = token_set.tokens
    groups = token_set.groups
    if request.brand_id is not None:
        brand = next((b for b in token_set.brands if b.matches(request.brand_id)), None)
        if brand is None:
            payload = brand_not_found(
                brand_id=request.brand_id,
                known_brand_ids=[b.id for b in token_set.brands],
            )
            raise BrandNotFoundError(payload.message, payload.details, payload.hint)
        tokens = tuple(t for t in tokens if t.brand_id == brand.id)
        groups = tuple(g for g in groups if g.brand_id == brand.id)

    themes: List[Theme] = []
    for ref in request.theme_ids:
        theme = next((t for t in token_set.themes if t.matches(ref)), None)
        if theme is None:
            payload = theme_not_found(
                theme_id=ref,
                known_theme_ids=[t.id for t in token_set.themes],
            )
            raise ThemeNotFoundError(payload.message, payload.details, payload.hint)
        themes.append(theme)

    return ExportScope(
        tokens=tuple(tokens),
        groups=tuple(groups),
        collections=token_set.collections,
        themes=tuple(themes),
        brand=brand,
    )


# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------

class DocumentComposer:
    """
    Gera a lista ordenada de documentos (`DocumentTree`) de uma exportação.

    O composer é reentrante: nenhuma opção é alterada durante `generate`,
    e o estado de uma chamada (avisos, índices) vive em `_CompositionRun`.
    """

    def __init__(
        self,
        options: ExportOptions,
        *,
        formatter: Optional[TreeFormatter] = None,
        overlay: Optional[ThemeOverlay] = None,
        policy: ClassificationPolicy = DEFAULT_POLICY,
    ) -> None:
        self.options = options
        self.policy = policy
        self.formatter = formatter or NestedTreeFormatter(max_group_depth=policy.max_group_depth)
        self.overlay = overlay or SequentialThemeOverlay()

    def generate(self, scope: ExportScope) -> Composition:
        return _CompositionRun(self, scope).generate()


class _CompositionRun:
    def __init__(self, composer: DocumentComposer, scope: ExportScope) -> None:
        self.options = composer.options
        self.policy = composer.policy
        self.formatter = composer.formatter
        self.overlay = composer.overlay
        self.scope = scope
        self.all_tokens: Sequence[Token] = scope.tokens
        self.groups: Mapping[str, TokenGroup] = {g.id: g for g in scope.groups}
        self.warnings: List[str] = []
        self.documents: List[DocumentTree] = []

    # -- entrada -----------------------------------------------------------

    def generate(self) -> Composition:
        style = self.options.export_themes_as
        themes = list(self.scope.themes)
        tokens = list(self.scope.tokens)

        if style is ThemeExportStyle.APPLY_DIRECTLY and themes:
            tokens = self.overlay.apply_themes(self.all_tokens, tokens, themes)
            self.all_tokens = tokens
            themes = []

        if not themes or style in (ThemeExportStyle.NONE, ThemeExportStyle.APPLY_DIRECTLY):
            self._generate_base_only(self._partitions(tokens, expand_components=True))
        elif style is ThemeExportStyle.NESTED_THEMES:
            self._generate_nested(self._partitions(tokens, expand_components=True), themes)
        elif style is ThemeExportStyle.SEPARATE_FILES:
            self._generate_separate(self._partitions(tokens, expand_components=True), themes)
        elif style is ThemeExportStyle.MERGED_THEME:
            self._generate_merged(self._partitions(tokens, expand_components=False), themes)

        return Composition(documents=tuple(self.documents), warnings=tuple(self.warnings))

    # -- particionamento ---------------------------------------------------

    @property
    def by_collection(self) -> bool:
        return self.options.file_structure is FileStructure.SEPARATE_BY_COLLECTION

    def _partitions(self, tokens: Sequence[Token], *, expand_components: bool) -> List[Partition]:
        structure = self.options.file_structure
        if structure is FileStructure.SINGLE_FILE:
            return single_partition(tokens)
        if structure is FileStructure.SEPARATE_BY_TYPE:
            return partitions_by_type(tokens)

        result: List[Partition] = []
        for partition in partitions_by_collection(tokens, self.scope.collections, self.policy, self.warnings):
            if expand_components and partition.category is Category.COMPONENT:
                result.extend(component_partitions(partition, self.groups, self.policy, self.warnings))
            else:
                result.append(partition)
        return result

    # -- primitivas --------------------------------------------------------

    def _tree(
        self,
        tokens: Sequence[Token],
        *,
        theme_key: Optional[str] = None,
        export_base_values: bool = True,
    ) -> Optional[dict]:
        return self.formatter.tokens_to_tree(
            tokens,
            self.scope.groups,
            theme_key=theme_key,
            all_tokens=self.all_tokens,
            export_base_values=export_base_values,
        )

    def _emit(self, directory: str, file_name: str, tree: Optional[dict]) -> None:
        if tree is None:
            return
        self.documents.append(DocumentTree(directory=directory, file_name=file_name, tree=tree))

    def _emit_base(self, partition: Partition) -> None:
        self._emit(partition.directory, partition.file_name, self._tree(partition.tokens))

    def _themed_tokens(self, partition: Partition, themes: Sequence[Theme]) -> List[Token]:
        """Overlay dos temas sobre a partição; vazio = partição pulada."""
        overlaid = self.overlay.apply_themes(self.all_tokens, partition.tokens, themes)
        if not self.options.export_only_themed_tokens:
            return overlaid
        changed = changed_token_ids(partition.tokens, overlaid)
        return [t for t in overlaid if t.id in changed]

    # -- estilos -----------------------------------------------------------

    def _generate_base_only(self, partitions: Sequence[Partition]) -> None:
        if not self.options.export_base_values:
            return
        for partition in partitions:
            self._emit_base(partition)

    def _generate_nested(self, partitions: Sequence[Partition], themes: Sequence[Theme]) -> None:
        for partition in partitions:
            if partition.is_root_level:
                self._emit_base(partition)
                continue

            trees = []
            if self.options.export_base_values:
                trees.append(self._tree(partition.tokens))
            for theme in themes:
                themed = self._themed_tokens(partition, [theme])
                if not themed:
                    continue
                trees.append(self._tree(themed, theme_key=theme_key(theme), export_base_values=False))
            self._emit(partition.directory, partition.file_name, merge_all(trees))

    def _generate_separate(self, partitions: Sequence[Partition], themes: Sequence[Theme]) -> None:
        for partition in partitions:
            if partition.is_root_level or self.options.export_base_values:
                self._emit_base(partition)

        for theme in themes:
            for partition in partitions:
                if partition.is_root_level:
                    continue
                if self.by_collection and partition.category is Category.BRAND:
                    continue
                themed = self._themed_tokens(partition, [theme])
                if not themed:
                    continue
                directory = theme_brand_dir(theme) if self.by_collection else theme_camel_dir(theme)
                self._emit(directory, partition.file_name, self._tree(themed))

        if not self.by_collection:
            return
        # resumos de brand depois de todos os documentos por tema
        for theme in themes:
            summary = self.overlay.apply_themes(self.all_tokens, self.scope.tokens, [theme])
            self._emit(BRAND_DIR, json_name(theme_label(theme)), self._tree(summary))

    def _generate_merged(self, partitions: Sequence[Partition], themes: Sequence[Theme]) -> None:
        for partition in partitions:
            if partition.is_root_level or self.options.export_base_values:
                self._emit_base(partition)

        for partition in partitions:
            if partition.is_root_level:
                continue
            themed = self._themed_tokens(partition, themes)
            if not themed:
                continue
            self._emit(THEMED_DIR, partition.file_name, self._tree(themed))


# ---------------------------------------------------------------------------
# API direta
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ComposedExport:
    """
    Resultado de `compose_documents`.

    - documents: documentos finais, na ordem de geração
    - collisions: destinos repetidos descartados (modo warn)
    - warnings: avisos do composer seguidos da descrição de cada colisão
    """

    documents: Tuple[OutputDocument, ...]
    collisions: Tuple[PathCollision, ...] = ()
    warnings: Tuple[str, ...] = ()

    def paths(self) -> List[str]:
        return [d.path for d in self.documents]


def compose_documents(
    token_set: TokenSet,
    options: Optional[ExportOptions] = None,
    request: Optional[ExportRequest] = None,
    *,
    formatter: Optional[TreeFormatter] = None,
    overlay: Optional[ThemeOverlay] = None,
    policy: ClassificationPolicy = DEFAULT_POLICY,
) -> ComposedExport:
    """
    Executa resolução, composição, deduplicação e serialização sem Engine.

    Erros de configuração são levantados imediatamente (sem saída parcial).
    Colisões de destino seguem `options.on_path_collision`: em modo warn
    elas voltam no resultado, nunca são descartadas em silêncio.

    Returns:
        ComposedExport: Documentos finais, colisões e avisos.
    """
    options = options or ExportOptions()
    scope = resolve_inputs(token_set, request)
    composer = DocumentComposer(options, formatter=formatter, overlay=overlay, policy=policy)
    composition = composer.generate(scope)
    report = dedupe_documents(composition.documents, policy=options.on_path_collision)
    return ComposedExport(
        documents=tuple(doc.render(options.indent) for doc in report.documents),
        collisions=report.collisions,
        warnings=composition.warnings + tuple(c.describe() for c in report.collisions),
    )
