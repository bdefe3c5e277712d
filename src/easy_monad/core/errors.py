# src/easy_monad/core/errors.py
"""
easy_monad — Estrutura canônica de erros de domínio (v1)

Este módulo define o `ErrorSet`, a coleção ordenada de erros de domínio
acumulados por uma Operation durante sua execução.

Erros de domínio são resultados esperados da lógica de negócio e fazem parte
do contrato operacional do sistema, devendo ser:

- explícitos (código estável + descrição humana)
- ordenados (ordem de inserção preservada)
- estáveis (o primeiro registro de um código nunca é sobrescrito)

Política de escrita (v1):
    - `add(code, description)` insere apenas quando o código está ausente
    - não existe remoção nem sobrescrita
    - nenhuma operação do ErrorSet levanta exceção

Limites explícitos:
    - Não decide se a Operation deve ser abortada
    - Não registra logs
    - Não traduz descrições (responsabilidade da capability de localização)
"""

from __future__ import annotations

from typing import Any, Dict, Hashable, Iterator, List, Optional, Tuple


DEFAULT_ERROR_DESCRIPTION = "Something went wrong"


class ErrorSet:
    """
    Coleção ordenada `código -> descrição` com semântica first-write-wins.

    Decisões arquiteturais:
        - A estrutura interna não é exposta; a única mutação pública é `add`
        - A ordem de iteração é sempre a ordem de inserção
        - Códigos podem ser qualquer valor hashable (tipicamente `str`)

    Invariantes:
        - Um código, uma vez registrado, mantém a primeira descrição recebida
        - `is_empty()` e `any()` são sempre complementares
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: Dict[Hashable, str] = {}

    # -----------------------------
    # Escrita
    # -----------------------------
    def add(self, code: Hashable, description: str) -> None:
        if code not in self._entries:
            self._entries[code] = description

    # -----------------------------
    # Leitura
    # -----------------------------
    def is_empty(self) -> bool:
        return not self._entries

    def any(self) -> bool:
        return bool(self._entries)

    def get(self, code: Hashable, default: Optional[str] = None) -> Optional[str]:
        return self._entries.get(code, default)

    def items(self) -> List[Tuple[Hashable, str]]:
        return list(self._entries.items())

    def codes(self) -> List[Hashable]:
        return list(self._entries)

    def to_dict(self) -> Dict[Hashable, str]:
        """Retorna uma cópia rasa dos pares registrados (ordem preservada)."""
        return dict(self._entries)

    def lines(self) -> Iterator[str]:
        """Gera `"código: descrição"` sob demanda; cada chamada recomeça do início."""
        for code, description in self._entries.items():
            yield f"{code}: {description}"

    def to_list(self) -> List[str]:
        return list(self.lines())

    def to_string(self) -> str:
        return ", ".join(self.lines())

    def only_messages(self) -> List[str]:
        """Descrições sem nenhum caractere `:`.

        Importante:
        - O filtro é aplicado ao texto inteiro da descrição, não apenas a um
          prefixo `código: `. "Error: retry at 10:30" vira "Error retry at 1030".
        """
        return [description.replace(":", "") for description in self._entries.values()]

    # -----------------------------
    # Protocolos Python
    # -----------------------------
    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __contains__(self, code: object) -> bool:
        return code in self._entries

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self._entries)

    def __getitem__(self, code: Hashable) -> str:
        return self._entries[code]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ErrorSet):
            return NotImplemented
        return list(self._entries.items()) == list(other._entries.items())

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"ErrorSet({self._entries!r})"
