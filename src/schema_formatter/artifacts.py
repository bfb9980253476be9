"""
Blueprints of the files a scaffolding run produces.

Only paths and template data are computed here; rendering, overwrite
confirmation and writing stay with the caller.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from schema_formatter.config import settings
from schema_formatter.descriptors import ModelDescriptor
from schema_formatter.model import Schema, as_schema
from schema_formatter.naming import migration_class_name, model_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedFile:
    path: Path                  # relative to the application root
    data: Dict[str, Any] = field(default_factory=dict)


def model_files(models: Iterable[ModelDescriptor], models_dir: Optional[Path] = None) -> List[GeneratedFile]:
    base = models_dir or settings.models_dir
    return [GeneratedFile(base / f"{m.model_name}.js", m.to_template_context()) for m in models]


def migration_files(
    schema: Union[Schema, Mapping[str, Any]],
    now: Optional[datetime] = None,
    migrations_dir: Optional[Path] = None,
) -> List[GeneratedFile]:
    """
    One create-table migration per table, link tables included.
    Prefixes are ``now`` in epoch milliseconds plus the table index so the
    files sort in schema order.
    """
    base = migrations_dir or settings.migrations_dir
    start = int((now or datetime.now()).timestamp() * 1000)

    files = []
    for i, table in enumerate(as_schema(schema).table_list()):
        files.append(GeneratedFile(
            base / f"{start + i}_{table.name}_schema.js",
            {"create": True, "table": table.name, "name": migration_class_name(table.name)},
        ))
    logger.debug("Prepared %d migration files", len(files))
    return files


def factory_file(
    schema: Union[Schema, Mapping[str, Any]],
    factory_path: Optional[Path] = None,
) -> GeneratedFile:
    tables = [
        {"name": model_name(t.name), "table": t.name}
        for t in as_schema(schema).table_list()
        if not t.is_link
    ]
    return GeneratedFile(factory_path or settings.factory_path, {"tables": tables})
