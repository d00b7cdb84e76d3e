# src/atlas_tokens/core/__init__.py
"""
Core do Atlas Tokens.

Reúne as responsabilidades essenciais da exportação, livres de I/O remoto
e de adapters:

    - config       → configuração (merge, validação, hashing)
    - model        → working set imutável
    - classify     → categorias de coleção e grupos de componente
    - overlay      → temas sobre tokens base
    - tree         → tokens → árvore aninhada
    - compose      → documentos de saída
    - pipeline     → Steps, RunContext, registry
    - engine       → planner + executor
    - traceability → manifest

Princípios fundamentais:
    - Mesmas entradas → mesmos documentos, na mesma ordem
    - Nenhum estado global mutável
    - Erros de configuração são fatais; lacunas de integridade viram avisos
"""
