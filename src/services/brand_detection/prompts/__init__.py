"""Prompt files sent to the discovery model."""

from services.brand_detection.prompts.loader import (
    PromptFile,
    clear_prompt_cache,
    prompt_path,
    read_prompt,
    render_prompt,
)

__all__ = ["PromptFile", "clear_prompt_cache", "prompt_path", "read_prompt", "render_prompt"]
