"""sketshy: a character-grid diagram editor core."""

from sketshy.config import EditorConfig
from sketshy.editor import Editor
from sketshy.script import run_script


def render_script(src: str, unicode: bool = True) -> str:
    """Replay a gesture script and return the exported canvas text.

    Args:
        src: Gesture script source (see `sketshy.script`).
        unicode: True for Unicode box-drawing characters; False for ASCII fallback.

    Returns:
        The canvas, one newline-terminated line per row, or an empty string
        if nothing was drawn.

    Raises:
        ValueError: If the script cannot be parsed.
    """
    editor = run_script(src, EditorConfig(unicode=unicode))
    return editor.canvas.export().decode("utf-8")
