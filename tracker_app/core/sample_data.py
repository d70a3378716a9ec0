"""Demonstration rows shown before any export is uploaded."""

from __future__ import annotations

from .models import RawRow


def _row(project, kind, responsible, reporter, priority, status, created, resolved="") -> RawRow:
    return {
        "Nome do projeto": project,
        "Tipo de item": kind,
        "Responsavel": responsible,
        "Relator": reporter,
        "Prioridade": priority,
        "Status": status,
        "Criado": created,
        "Resolvido": resolved,
    }


SAMPLE_ROWS: tuple[RawRow, ...] = (
    _row("Sistema de Vendas", "Bug", "João Silva", "Maria Santos", "Alta", "Resolvido", "15/01/2024", "20/01/2024"),
    _row("Sistema de Vendas", "Feature", "Ana Costa", "Pedro Lima", "Média", "Aberto", "22/01/2024"),
    _row(
        "Portal do Cliente", "Bug", "Carlos Oliveira", "Lucia Ferreira", "Alta", "Resolvido", "10/01/2024", "25/01/2024"
    ),
    _row("Portal do Cliente", "Melhoria", "João Silva", "Maria Santos", "Baixa", "Aberto", "28/01/2024"),
    _row("App Mobile", "Feature", "Ana Costa", "Pedro Lima", "Alta", "Resolvido", "05/01/2024", "18/01/2024"),
    _row("App Mobile", "Bug", "Carlos Oliveira", "Lucia Ferreira", "Média", "Resolvido", "12/01/2024", "16/01/2024"),
)


def sample_rows() -> list[RawRow]:
    return [dict(row) for row in SAMPLE_ROWS]
