"""Generate Python registration calls from a YAML/JSON dictionary file.

Usage:
    python scripts/generate_registrations.py data/i18n/demo.yaml > translations.py
    python scripts/generate_registrations.py data/i18n/demo.ru.yaml --locale ru -o translations_ru.py
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from i18nx import DictionaryParseError, parse_json, parse_yaml
from i18nx.codegen import generate_source


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("path", type=Path, help="dictionary file (.yaml, .yml or .json)")
    parser.add_argument("--locale", default=None, help="treat the file as a single-locale dictionary")
    parser.add_argument("-o", "--output", type=Path, default=None, help="write to this file instead of stdout")
    args = parser.parse_args(argv)

    text = args.path.read_text(encoding="utf-8")
    try:
        document = parse_json(text) if args.path.suffix == ".json" else parse_yaml(text)
        source = generate_source(document, locale=args.locale, source_name=args.path.name)
    except DictionaryParseError as e:
        print(f"{args.path}: {e}", file=sys.stderr)
        return 1

    if args.output is None:
        sys.stdout.write(source)
    else:
        args.output.write_text(source, encoding="utf-8")
        print(f"Wrote {args.output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
