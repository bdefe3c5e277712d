# src/easy_monad/core/__init__.py
"""
Core do easy_monad.

Este pacote reúne a implementação canônica do protocolo de execução:

    - errors      → ErrorSet (erros de domínio, first-write-wins)
    - exceptions  → exceções tipadas (ProcessError, erros de programação)
    - operation   → ciclo de vida, early exit, composição e hooks

O core é projetado para ser:
    - síncrono e determinístico
    - testável de forma isolada
    - livre de dependências de frameworks web
"""
