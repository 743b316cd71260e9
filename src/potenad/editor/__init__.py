"""Editor session runtime.

Example usage:
    from potenad.editor import EditorSession

    session = EditorSession.create()
    session.open_file(Path("notes.txt"))
    result = session.close()
    if not result.success:
        show_error(result.error)
"""

from potenad.editor.result import SaveResult
from potenad.editor.session import EditorSession

__all__ = [
    "EditorSession",
    "SaveResult",
]
