"""JSON codec: the camelCase wire form of the config."""

from __future__ import annotations

import json

from designkit.core.entities import DesignConfig


def export_json(config: DesignConfig) -> str:
    return json.dumps(config.to_wire(), indent=2, ensure_ascii=False) + "\n"
