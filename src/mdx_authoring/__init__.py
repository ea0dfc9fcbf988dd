# Editing engine for Markdown/MDX authoring commands
