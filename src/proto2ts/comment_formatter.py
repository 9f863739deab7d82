# ===== SECTION: IMPORTS =====
import textwrap
from typing import List, Optional


# ===== SECTION: FUNCTIONS =====


def clean_comment(comment: Optional[str]) -> str:
    """Cleans a pre-resolved schema comment for use inside a JSDoc block."""
    if not comment:
        return ""

    lines = [line.rstrip() for line in comment.splitlines()]
    # Drop blank lines at either end, keep the ones in between
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        return ""

    dedented_comment = textwrap.dedent("\n".join(lines)).strip()

    # A literal "*/" would close the JSDoc block early
    return dedented_comment.replace("*/", "* /")


def format_doc_comment(
    comment: Optional[str], deprecated: bool = False, prefix: str = ""
) -> List[str]:
    """
    Renders a comment and deprecation flag as JSDoc lines.

    Args:
        comment (Optional[str]): The comment text, or None
        deprecated (bool): Whether to append an `@deprecated` tag
        prefix (str): Text placed before the first comment line (e.g., 'RED - ')

    Returns:
        List[str]: The JSDoc lines, or an empty list when there is nothing to render
    """
    content = clean_comment(comment)
    lines = content.split("\n") if content else []
    if lines and prefix:
        lines[0] = prefix + lines[0]
    if deprecated:
        lines.append("@deprecated")

    if not lines:
        return []
    if len(lines) == 1:
        return [f"/** {lines[0]} */"]

    doc = ["/**"]
    doc.extend(f" * {line}".rstrip() for line in lines)
    doc.append(" */")
    return doc
