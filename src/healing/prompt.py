"""Corrective instructions handed to the generator between attempts."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from suggest.suggestions import suggest_all

if TYPE_CHECKING:
    from collections.abc import Sequence

    from validation.errors import ValidationErrorSet

_INVALID_COMPONENT = re.compile(r"^(?P<name>\S+) is not a valid component$")
_FENCED_BLOCK = re.compile(r"```[\w+-]*[^\S\n]*\n(.*?)```", re.DOTALL)


def invalid_names(import_errors: Sequence[str]) -> list[str]:
    names: list[str] = []
    for message in import_errors:
        match = _INVALID_COMPONENT.match(message)
        if match and match.group("name") not in names:
            names.append(match.group("name"))
    return names


def code_block_language(framework: str) -> str:
    return framework if framework in {"vue", "svelte"} else "tsx"


@dataclass(frozen=True)
class CorrectionPayload:
    previous_code: str
    errors: ValidationErrorSet
    suggestions: dict[str, str]
    known_names: tuple[str, ...]
    more_count: int
    attempt: int
    max_attempts: int
    framework: str = "react"
    import_path: str = ""

    def render(self) -> str:
        """Render the payload as prompt text."""
        lang = code_block_language(self.framework)
        source = self.import_path or "the component library"
        lines = [
            f"## CODE CORRECTION REQUIRED (Attempt {self.attempt} of {self.max_attempts})",
            "",
            "Your previous code contained errors. Please fix them while preserving "
            "the original intent.",
            "",
        ]
        lines.extend(_framework_instructions(self.framework, self.import_path))

        if self.errors.syntax_errors:
            if self.framework == "svelte":
                lines += ["### Svelte Syntax Errors", "These indicate invalid Svelte structure:"]
            else:
                lines += ["### TypeScript Syntax Errors", "These prevent the code from compiling:"]
            lines += [f"- {error}" for error in self.errors.syntax_errors]
            lines.append("")

        if self.errors.pattern_errors:
            lines += ["### Forbidden Patterns", "These patterns are not allowed in this codebase:"]
            lines += [f"- {error}" for error in self.errors.pattern_errors]
            lines.append("")

        if self.errors.import_errors:
            lines += ["### Import Errors", f'These components do not exist in "{source}":']
            for error in self.errors.import_errors:
                match = _INVALID_COMPONENT.match(error)
                hint = self.suggestions.get(match.group("name")) if match else None
                lines.append(f'- {error}. Did you mean "{hint}"?' if hint else f"- {error}")
            lines.append("")

            if self.known_names:
                lines += ["**Available components include:**", ", ".join(self.known_names)]
                if self.more_count:
                    lines.append(f"... and {self.more_count} more")
                lines.append("")

        lines += ["### Original Code (with errors)", f"```{lang}", self.previous_code, "```", ""]
        lines.append("### Correction Instructions")
        steps = [
            "Fix ALL errors listed above",
            "Keep the same component structure and layout",
            "Do NOT add new features - only fix the errors",
        ]
        if self.framework == "svelte":
            steps.append("Use proper Svelte 5 syntax (class=, onclick=, NOT on:click=)")
            steps.append("NEVER nest a component inside itself")
        else:
            steps.append("Ensure all elements are properly opened and closed")
        steps += [
            f'Only import components that exist in "{source}"',
            f"Return the COMPLETE corrected code in a ```{lang} code block",
            "Do NOT include any explanation - just the corrected code block",
        ]
        lines += [f"{number}. {step}" for number, step in enumerate(steps, start=1)]
        return "\n".join(lines)


def _framework_instructions(framework: str, import_path: str) -> list[str]:
    if framework == "svelte":
        return [
            "### Svelte Format Requirements",
            "- Use `<script module>` (NOT `<script context=\"module\">`)",
            f'- Import components with `import {{ ComponentName }} from "{import_path}";`',
            "- Do not use React imports or JSX attributes such as `className`",
            "",
        ]
    if framework == "vue":
        return [
            "### Vue Format Requirements",
            "Use the Vue 3 composition API with `<script setup>`.",
            "",
        ]
    return []


def build_correction(
    previous_code: str,
    errors: ValidationErrorSet,
    known_names: Sequence[str],
    *,
    attempt: int,
    max_attempts: int,
    framework: str = "react",
    import_path: str = "",
    sample_size: int = 20,
) -> CorrectionPayload:
    """Assemble the corrective payload for the next attempt.

    Args:
        previous_code: Code of the attempt that failed validation
        errors: Its validation errors, passed through verbatim
        known_names: Authoritative names in a stable order
        attempt: Number of the attempt the payload will produce
        max_attempts: Attempt budget of the session
        framework: Target framework
        import_path: Design-system module the code should import from
        sample_size: How many known names to list before "... and N more"
    """
    sample = tuple(known_names[:sample_size])
    return CorrectionPayload(
        previous_code=previous_code,
        errors=errors,
        suggestions=suggest_all(invalid_names(errors.import_errors), known_names),
        known_names=sample,
        more_count=max(len(known_names) - len(sample), 0),
        attempt=attempt,
        max_attempts=max_attempts,
        framework=framework,
        import_path=import_path,
    )


def extract_code_block(response: str) -> str:
    """Return the first fenced code block of a response, or the stripped response."""
    match = _FENCED_BLOCK.search(response)
    if match:
        return match.group(1).strip("\n")
    return response.strip()


__all__ = [
    "CorrectionPayload",
    "build_correction",
    "code_block_language",
    "extract_code_block",
    "invalid_names",
]
