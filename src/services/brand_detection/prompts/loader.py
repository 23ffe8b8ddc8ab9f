"""
Discovery prompt files.

Each prompt is a markdown file in this directory with optional YAML
frontmatter (``version``, ``description``, ``requires``) followed by a Jinja2
body. Rendering raises when a required or referenced variable is absent.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml
from jinja2 import BaseLoader, Environment, StrictUndefined

logger = logging.getLogger(__name__)

PROMPTS_DIR = Path(__file__).parent

_jinja = Environment(loader=BaseLoader(), undefined=StrictUndefined)


@dataclass(frozen=True)
class PromptFile:
    name: str
    body: str
    version: str = "v1"
    description: str = ""
    requires: Tuple[str, ...] = ()

    def render(self, **variables: Any) -> str:
        missing = [r for r in self.requires if r not in variables]
        if missing:
            raise ValueError(f"Prompt '{self.name}' is missing variables: {missing}")
        return _jinja.from_string(self.body).render(**variables)


def prompt_path(name: str) -> Path:
    return PROMPTS_DIR / f"{name}.md"


@lru_cache(maxsize=8)
def read_prompt(name: str) -> PromptFile:
    """Parse a prompt file once; call ``clear_prompt_cache`` after editing one."""
    path = prompt_path(name)
    if not path.exists():
        raise FileNotFoundError(f"Prompt file not found: {path}")

    metadata, body = _split_frontmatter(path.read_text(encoding="utf-8"))
    return PromptFile(
        name=name,
        body=body,
        version=str(metadata.get("version", "v1")),
        description=metadata.get("description", ""),
        requires=tuple(metadata.get("requires") or ()),
    )


def _split_frontmatter(content: str) -> Tuple[Dict[str, Any], str]:
    if not content.startswith("---"):
        return {}, content

    parts = content.split("---", 2)
    if len(parts) < 3:
        return {}, content

    try:
        metadata = yaml.safe_load(parts[1]) or {}
    except yaml.YAMLError as e:
        logger.warning(f"Ignoring malformed prompt frontmatter: {e}")
        metadata = {}
    return metadata, parts[2].strip()


def render_prompt(name: str, **variables: Any) -> str:
    return read_prompt(name).render(**variables)


def clear_prompt_cache() -> None:
    read_prompt.cache_clear()
