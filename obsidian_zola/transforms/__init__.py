"""Markup and frontmatter transforms for obsidian-zola."""
