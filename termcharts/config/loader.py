# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Termcharts Contributors
#
# This file is part of Termcharts.
#
# Termcharts is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Termcharts is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from termcharts.config.options import parse_options
from termcharts.errors import ChartDocumentError, ChartError
from termcharts.types import ChartKind, RenderConfig, Series

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChartDocument:
    """One chart described in a YAML/JSON file."""

    kind: ChartKind
    series: Series
    config: RenderConfig
    source: str | None = None


class ChartDocumentLoader:
    """
    Loads chart documents from .yaml / .yml / .json files.

    A file holds either a single chart::

        type: bar
        title: Monthly Expenses
        options: {width: 60}
        data: {Food: 1200, Rent: 1800}

    or a ``charts:`` list of such mappings. ``data`` may also be a list of
    ``[label, value]`` pairs or ``{label: ..., value: ...}`` objects, which
    keeps the order explicit in formats without ordered mappings.
    """

    def load(self, path: Path | str) -> tuple[ChartDocument, ...]:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise ChartDocumentError(code="document_not_found", message=f"Chart file does not exist: {path}")

        raw = self._read_file(path)
        if isinstance(raw, Mapping) and "charts" in raw:
            charts = raw["charts"]
            if not isinstance(charts, list):
                raise ChartDocumentError(code="invalid_document", message="'charts' must be a list.")
            docs = tuple(self.from_mapping(item, source=f"{path}#{i}") for i, item in enumerate(charts))
        else:
            docs = (self.from_mapping(raw, source=str(path)),)

        logger.debug("loaded %d chart(s) from %s", len(docs), path)
        return docs

    def from_mapping(self, data: Any, *, source: str | None = None) -> ChartDocument:
        where = f"{source}: " if source else ""
        if not isinstance(data, Mapping):
            raise ChartDocumentError(code="invalid_document", message=f"{where}chart must be a mapping/object.")

        kind_token = data.get("type", data.get("kind"))
        if kind_token is None:
            raise ChartDocumentError(code="missing_type", message=f"{where}chart needs a 'type'.")

        options = data.get("options") or {}
        if not isinstance(options, Mapping):
            raise ChartDocumentError(code="invalid_options", message=f"{where}'options' must be a mapping/object.")
        options = dict(options)
        if "title" in data:
            options.setdefault("title", data["title"])

        try:
            kind = ChartKind.from_str(kind_token)
            config = parse_options(kind, options)
            series = self._parse_data(data.get("data"))
        except ChartError as e:
            raise ChartDocumentError(code=e.code, message=f"{where}{e.message}", details=e.details) from e

        return ChartDocument(kind=kind, series=series, config=config, source=source)

    def _read_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        raw = path.read_text(encoding="utf-8")

        if suffix == ".json":
            try:
                return json.loads(raw)
            except json.JSONDecodeError as e:
                raise ChartDocumentError(code="invalid_json", message=f"{path}: {e}") from e

        if suffix in (".yaml", ".yml"):
            try:
                import yaml
            except ImportError as e:
                raise ChartDocumentError(
                    code="yaml_dependency_missing",
                    message="YAML chart files require PyYAML.",
                    details={"hint": "pip install pyyaml", "path": str(path)},
                ) from e
            try:
                return yaml.safe_load(raw)
            except yaml.YAMLError as e:
                raise ChartDocumentError(code="invalid_yaml", message=f"{path}: {e}") from e

        raise ChartDocumentError(
            code="unsupported_extension",
            message=f"Unsupported chart file extension: {path.suffix!s}",
            details={"supported": [".yaml", ".yml", ".json"]},
        )

    def _parse_data(self, raw: Any) -> Series:
        if raw is None:
            return Series()
        if isinstance(raw, Mapping):
            return Series.from_mapping({str(k): v for k, v in raw.items()})
        if not isinstance(raw, list):
            raise ChartDocumentError(code="invalid_data", message="'data' must be a mapping or a list.")

        pairs: list[tuple[str, Any]] = []
        for item in raw:
            if isinstance(item, Mapping) and "label" in item and "value" in item:
                pairs.append((str(item["label"]), item["value"]))
            elif isinstance(item, (list, tuple)) and len(item) == 2:
                pairs.append((str(item[0]), item[1]))
            else:
                raise ChartDocumentError(
                    code="invalid_data",
                    message=f"Data entries must be [label, value] or {{label, value}}, got {item!r}.",
                )
        return Series.from_pairs(pairs)


def load_chart_documents(path: Path | str) -> tuple[ChartDocument, ...]:
    return ChartDocumentLoader().load(path)
