"""Configuration for hostname expansion and template substitution."""

from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True)
class ExpansionConfig:
    """Knobs shared by the expander, the template engine, and the CLI."""

    # Marker replaced by each hostname in a template
    placeholder: str = "{}"

    # Join separator for plain expansion output
    expand_separator: str = ","

    # Join separator for substituted template output
    template_separator: str = "\n"

    # Pad mismatched ranges to the start operand's width instead of failing
    lenient_width: bool = False

    # Upper bound on the number of hostnames produced by one notation
    max_hosts: int = 100_000

    def separator_for(self, template: Optional[str]) -> str:
        """Return the default join separator for the given output mode."""
        if template is None:
            return self.expand_separator
        return self.template_separator

    def with_overrides(self, **overrides: Any) -> "ExpansionConfig":
        """Return a copy with the non-``None`` overrides applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


# Global configuration instance
DEFAULT_CONFIG = ExpansionConfig()
