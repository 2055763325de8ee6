from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from tradins_api.api.app import create_app
from tradins_api.infrastructure.storage import StaticStorageModeProvider
from tradins_api.shared.config import settings
from tradins_api.shared.config.container import ApplicationContainer


def render_openapi() -> str:
    """Render the OpenAPI document; the storage provider is never queried while rendering."""
    container = ApplicationContainer(settings, storage_mode_provider=StaticStorageModeProvider("memory"))
    spec = create_app(settings, container=container).openapi()
    return json.dumps(spec, indent=2, ensure_ascii=False) + "\n"


def main() -> int:
    parser = argparse.ArgumentParser(description="Export the health API OpenAPI document")
    parser.add_argument("--output", type=Path, default=Path("docs/openapi.json"))
    parser.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 when the file on disk differs from the current app",
    )
    args = parser.parse_args()

    rendered = render_openapi()
    output: Path = args.output
    if args.check:
        current = output.read_text(encoding="utf-8") if output.is_file() else ""
        if current != rendered:
            print(f"OpenAPI document {output} is out of date; run without --check")
            return 1
        print(f"OpenAPI document {output} is up to date")
        return 0

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(rendered, encoding="utf-8")
    print(f"OpenAPI exported to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
