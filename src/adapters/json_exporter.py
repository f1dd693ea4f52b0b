"""Exportación JSON de la lista de tareas.

Por qué JSON:
- Interoperabilidad con otras herramientas y scripts.
- Usa los nombres del wire (`isCompleted`, `taskPriority`) para que el archivo
  se pueda reenviar al backend sin transformar.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

from core.domain.models import Task


def export_tasks_json(*, tasks: Iterable[Task], output_path: Path) -> Path:
    """Exporta las tareas a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"notes": [task.model_dump(mode="json", by_alias=True) for task in tasks]}
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
