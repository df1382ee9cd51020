"""Link and frontmatter transforms for Obsidian Hugo."""
