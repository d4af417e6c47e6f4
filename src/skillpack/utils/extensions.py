"""Recognized text file extensions."""

from typing import Optional

# Extensions (lower-case, no dot) that are safe to import from an archive
TEXT_FILE_EXTENSIONS: frozenset[str] = frozenset({
    # Docs
    "md", "mdx", "markdown", "txt", "rst", "adoc", "org", "tex",
    # Data / config
    "json", "json5", "jsonc", "jsonl", "yaml", "yml", "toml", "ini", "cfg",
    "conf", "env", "properties", "csv", "tsv", "xml", "plist", "lock",
    # Web
    "html", "htm", "css", "scss", "sass", "less", "svg", "vue", "svelte",
    "astro",
    # JavaScript / TypeScript
    "js", "mjs", "cjs", "jsx", "ts", "mts", "cts", "tsx",
    # Scripting
    "py", "pyi", "rb", "php", "pl", "lua", "r", "sh", "bash", "zsh", "fish",
    "ps1", "bat", "cmd",
    # Compiled languages
    "c", "h", "cc", "cpp", "hpp", "cs", "go", "rs", "java", "kt", "kts",
    "swift", "scala", "dart", "zig", "ex", "exs", "erl", "hs", "ml", "clj",
    # Other
    "sql", "graphql", "gql", "proto", "prisma", "tf", "hcl", "dockerfile",
    "gitignore", "editorconfig", "diff", "patch", "log",
})


def get_extension(path: str) -> Optional[str]:
    """Return the lower-cased text after the final '.', or None.

    A trailing '.' yields None as well.
    """
    parts = path.strip().lower().split(".")
    if len(parts) < 2:
        return None
    return parts[-1] or None
