"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from typing import Iterable

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import Task, UserProfile

_PRIORITY_LABELS = {1: "low", 2: "medium", 3: "high"}


def build_tasks_table(tasks: Iterable[Task]) -> Table:
    table = Table(title="Tasks")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Title", style="white")
    table.add_column("Content", style="dim")
    table.add_column("Priority", style="magenta")
    for task in tasks:
        table.add_row(
            task.id,
            task.title,
            task.content,
            _PRIORITY_LABELS.get(task.task_priority, str(task.task_priority)),
        )
    return table


def build_profile_panel(profile: UserProfile) -> Panel:
    """Panel para presentar el `UserProfile`."""

    body = Text()
    body.append(f"{profile.name}\n", style="bold")
    body.append(f"{profile.email}\n\n")
    body.append(f"Open tasks: {profile.number_of_notes}")
    return Panel(body, title=Text("Profile", style="bold yellow"), border_style="yellow")
