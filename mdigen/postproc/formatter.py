"""Source formatting through the project's prettier configuration."""

from __future__ import annotations

import json
import re
import subprocess
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Sequence

from ..logging import get_logger

DEFAULT_COMMAND: tuple[str, ...] = ("npx", "prettier")
DEFAULT_OPTIONS: Dict[str, Any] = {"parser": "typescript"}

Runner = Callable[[Sequence[str], str], str]

_OPTION_KEY = re.compile(r"^[A-Za-z][A-Za-z0-9]*$")


class FormattingError(RuntimeError):
    """Raised when the formatter cannot produce output for a file."""


class SourceFormatter:
    """Pipes generated source through prettier with merged style options."""

    def __init__(
        self,
        config_path: Path | None = None,
        *,
        enabled: bool = True,
        command: Sequence[str] | None = None,
        runner: Runner | None = None,
    ) -> None:
        self.config_path = config_path
        self.enabled = enabled
        self.command = list(command or DEFAULT_COMMAND)
        self._runner = runner or self._default_runner
        self._project_options: Dict[str, Any] | None = None
        self.logger = get_logger("formatter")

    def format(self, content: str, filename: str = "source.ts", **overrides: Any) -> str:
        """Return ``content`` formatted with project options merged with ``overrides``."""
        if not self.enabled:
            return content
        options = self.options(**overrides)
        args = [*self.command, "--stdin-filepath", filename, *_options_to_args(options)]
        self.logger.debug("Formatting %s with %s", filename, " ".join(args))
        return self._runner(args, content)

    def options(self, **overrides: Any) -> Dict[str, Any]:
        """Project options, then the TypeScript parser, then per-call ``overrides``."""
        merged: Dict[str, Any] = dict(self._load_project_options())
        merged.update(DEFAULT_OPTIONS)
        merged.update(overrides)
        return merged

    def _load_project_options(self) -> Dict[str, Any]:
        if self._project_options is not None:
            return self._project_options
        options: Dict[str, Any] = {}
        if self.config_path is not None and self.config_path.exists():
            try:
                loaded = json.loads(self.config_path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError) as exc:
                raise FormattingError(
                    f"Failed to read formatter config {self.config_path}: {exc}"
                ) from exc
            if not isinstance(loaded, dict):
                raise FormattingError(f"{self.config_path.name} must contain a JSON object")
            options = loaded
        self._project_options = options
        return options

    @staticmethod
    def _default_runner(args: Sequence[str], content: str) -> str:
        try:
            completed = subprocess.run(
                list(args),
                input=content,
                capture_output=True,
                text=True,
                encoding="utf-8",
                check=False,
            )
        except FileNotFoundError as exc:
            raise FormattingError(f"Formatter executable not found: {args[0]}") from exc
        if completed.returncode != 0:
            stderr = completed.stderr.strip() or "unknown error"
            raise FormattingError(f"Formatter exited with code {completed.returncode}: {stderr}")
        return completed.stdout


def _options_to_args(options: Mapping[str, Any]) -> List[str]:
    args: List[str] = []
    for key in sorted(options):
        if not _OPTION_KEY.match(key):
            continue
        value = options[key]
        flag = re.sub(r"(?<!^)(?=[A-Z])", "-", key).lower()
        if isinstance(value, bool):
            args.append(f"--{flag}" if value else f"--no-{flag}")
        elif value is None:
            continue
        elif isinstance(value, (str, int, float)):
            args.extend([f"--{flag}", str(value)])
        # prettier's nested "overrides" have no CLI form and are ignored here
    return args


__all__ = ["FormattingError", "SourceFormatter"]
