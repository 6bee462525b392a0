"""Pure extraction engine: grammar, headings, extractors and merge."""
