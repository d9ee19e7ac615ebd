#!/usr/bin/env python3
"""
Export the JSON Schema of roadmap content fragments.

Authors can point their editor at the written files to validate fragments
while writing them.

Usage:
    python scripts/export_content_schema.py [output_dir]   # default: ./schema
"""

import json
import sys
from pathlib import Path

# Add the parent directory to Python path to import src modules
sys.path.append(str(Path(__file__).parent.parent))

from src.services.content_loader import content_json_schema


def export_content_schema(output_dir: Path) -> list[Path]:
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, schema in content_json_schema().items():
        target = output_dir / f"{name}.schema.json"
        target.write_text(json.dumps(schema, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
        written.append(target)
    return written


def main() -> None:
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("schema")
    for path in export_content_schema(output_dir):
        print(f"Wrote {path}")


if __name__ == "__main__":
    main()
