# chatificial/core/template_engine.py

PATH_PLACEHOLDER = "{path}"
CONTENT_PLACEHOLDER = "{content}"
ALL_PLACEHOLDERS = (PATH_PLACEHOLDER, CONTENT_PLACEHOLDER)

# Content always ends with a newline, so the closing fence lands on its own line.
DEFAULT_TEMPLATE = (
    "`" + PATH_PLACEHOLDER + "`\n"
    "```\n"
    + CONTENT_PLACEHOLDER +
    "```"
)


def is_valid(template: str | None) -> bool:
    if not template or not template.strip():
        return False
    return all(p in template for p in ALL_PLACEHOLDERS)


def validate(template: str | None) -> str:
    """Return ``template`` if it carries both placeholders, else the default."""
    return template if is_valid(template) else DEFAULT_TEMPLATE


def apply(template: str, path: str, content: str) -> str:
    """
    Render one file block.

    Replacement is literal: every ``{path}`` first, then every ``{content}``.
    Content is newline-terminated before substitution and the rendered block
    is right-trimmed.
    """
    if not content.endswith("\n"):
        content += "\n"
    return (
        template
        .replace(PATH_PLACEHOLDER, path)
        .replace(CONTENT_PLACEHOLDER, content)
        .rstrip()
    )
