"""
State CLI Command
=================
Provides CLI interface for parsing location paths.

Commands:
- parse: Parse a single URL into navigation state
- clean: Print the normalized path of a URL
- check: Parse many URLs and report the invalid ones

Usage:
    urlstate parse http://abc.com:123/u/hatch/staging --base-url http://abc.com:123
    urlstate parse /u/hatch/mongodb/xenial --format yaml
    urlstate clean http://abc.com:123///a/b/c/d/
    urlstate check urls.txt --format json
"""
from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import List, TextIO

import yaml

from urlstate.state.parser import State


class StateCommand:
    """
    CLI command handler for path parsing operations.

    Wraps a configured State and renders its results as JSON, YAML or text.
    """

    def __init__(self, state: State):
        self.state = state

    def parse(self, url: str, format: str = "json") -> int:
        """
        Parse a URL and print its state.

        Args:
            url: URL or path to parse
            format: Output format - "json" or "yaml"

        Returns:
            Exit code (0 if the path is valid, 1 otherwise)
        """
        result = self.state.build_state(url)
        print(self._render(result.to_dict(), format))
        return 0 if result.is_valid else 1

    def clean(self, url: str) -> int:
        """Print the normalized path of a URL."""
        print(self.state.get_clean_path(url))
        return 0

    def check(self, source: str, format: str = "text") -> int:
        """
        Parse every URL in a file and report the invalid ones.

        Args:
            source: Path to a file with one URL per line, or "-" for stdin
            format: Output format - "text" or "json"

        Returns:
            Exit code (0 if all URLs are valid, 1 otherwise)
        """
        try:
            if source == "-":
                urls = self._read_urls(sys.stdin)
            else:
                with open(Path(source)) as f:
                    urls = self._read_urls(f)
        except OSError as e:
            print(f"Error reading {source}: {e}", file=sys.stderr)
            return 1

        invalid = []
        for url in urls:
            result = self.state.build_state(url)
            if not result.is_valid:
                invalid.append({"url": url, **result.to_dict()})

        if format == "json":
            output = {
                "checked": len(urls),
                "invalid_count": len(invalid),
                "invalid": invalid,
            }
            print(json.dumps(output, indent=2))
        else:
            if not invalid:
                print(f"All {len(urls)} URL(s) are valid.")
            else:
                print(f"Found {len(invalid)} invalid URL(s) out of {len(urls)}:\n")
                for entry in invalid:
                    print(f"  {entry['url']}: {entry['error']}")

        return 1 if invalid else 0

    @staticmethod
    def _read_urls(stream: TextIO) -> List[str]:
        urls = (line.strip() for line in stream)
        return [url for url in urls if url and not url.startswith("#")]

    @staticmethod
    def _render(data: dict, format: str) -> str:
        if format == "yaml":
            return yaml.safe_dump(data, default_flow_style=False, sort_keys=False).rstrip()
        return json.dumps(data, indent=2)
