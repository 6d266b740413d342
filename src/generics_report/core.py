from __future__ import annotations

from pathlib import Path
from typing import Any

from .collector import GenericsCollector
from .console import ConsoleManager
from .errors import SourceReadError
from .formatter import format_report
from .models import CollectedGenerics
from .parsing import RustSourceParser, SourceParser


class GenericsReportService:
    """
    Reads one source file, parses it, collects its generic parameters and
    renders the report.
    """

    def __init__(
        self,
        *,
        app_config: dict[str, Any],
        logger: ConsoleManager,
        parser: SourceParser | None = None,
    ) -> None:
        self._app_config = app_config
        self._logger = logger
        self._parser = parser or RustSourceParser()

    def run_report(self, path: Path) -> tuple[str, CollectedGenerics]:
        """
        Executes read -> parse -> traverse -> format for a single file.
        """
        source = self.read_source(path)
        self._logger.debug(f"Read {len(source)} characters from {path}")

        collected = self.analyze(source)
        self._logger.debug(
            f"Collected {len(collected.types)} type parameter(s) and "
            f"{len(collected.lifetimes)} lifetime parameter(s)"
        )
        return format_report(collected), collected

    def read_source(self, path: Path) -> str:
        encoding = self._app_config.get("encoding", "utf-8")
        try:
            return path.read_bytes().decode(encoding)
        except (OSError, UnicodeDecodeError, LookupError) as e:
            reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
            raise SourceReadError(str(path), reason) from e

    def analyze(self, source: str) -> CollectedGenerics:
        tree = self._parser.parse(source)
        collector = GenericsCollector(
            context_mode=self._app_config.get("context_mode", "stack"),
            collapse_bound_whitespace=self._app_config.get(
                "collapse_bound_whitespace", True
            ),
        )
        return collector.collect(tree)
