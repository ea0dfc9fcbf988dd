"""
CLI module for Markdown/MDX editing commands.

Provides command-line access to every editing operation.
"""

from mdx_authoring.cli.edit import main as edit_main

__all__ = ["edit_main"]
