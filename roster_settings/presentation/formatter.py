"""Text and JSON formatters for settings lines."""

from __future__ import annotations

import json

from roster_settings.domain.value_objects import SettingsLine


class SettingsFormatter:
    """Renders line reader output for the command line."""

    def format_error(self, exception: Exception) -> str:
        return f"Error: {exception}"

    def format(self, lines: list[SettingsLine], output_format: str = "text") -> str:
        if output_format == "json":
            return self.format_json(lines)
        return self.format_text(lines)

    def format_text(self, lines: list[SettingsLine]) -> str:
        if not lines:
            return "No settings found.\n"

        parts: list[str] = []
        for line in lines:
            rendered = " ".join(self._quote(t) for t in line.tokens)
            if line.has_error:
                suffix = f"  !! {line.status.get_display_name()}"
                if line.partial:
                    suffix += f" after {self._quote(line.partial)}"
                rendered = f"{rendered}{suffix}" if rendered else suffix.lstrip()
            parts.append(f"{line.number:>4}: {rendered}")

        errors = sum(1 for line in lines if line.has_error)
        parts.append("")
        parts.append(f"{len(lines)} lines, {errors} with errors")
        return "\n".join(parts) + "\n"

    def format_json(self, lines: list[SettingsLine]) -> str:
        payload = [
            {
                "line": line.number,
                "tokens": line.tokens,
                "status": line.status.value,
                **({"partial": line.partial} if line.has_error else {}),
            }
            for line in lines
        ]
        return json.dumps(payload, ensure_ascii=False, indent=2) + "\n"

    @staticmethod
    def _quote(token: str) -> str:
        """Quote a token the way the settings format would need it written."""
        if token and not any(c in token for c in " \t\"'\\#"):
            return token
        escaped = token.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
