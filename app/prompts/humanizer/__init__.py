"""
Humanizer Prompts
"""

from app.prompts.humanizer.modes import (
    DEFAULT_MODE,
    PROMPT_TEMPLATES,
    TEXT_MARKER,
    HumanizationMode,
    StealthTemplates,
    get_templates,
    render_template
)

__all__ = [
    'DEFAULT_MODE',
    'PROMPT_TEMPLATES',
    'TEXT_MARKER',
    'HumanizationMode',
    'StealthTemplates',
    'get_templates',
    'render_template'
]
