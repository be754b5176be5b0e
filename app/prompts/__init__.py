"""
Prompts Module

Universal prompts folder containing all AI prompts organized by service.

Structure:
- humanizer/ - Humanization prompts (subtle, balanced, strong, stealth)
"""

from app.prompts import humanizer

__all__ = ['humanizer']
