from typing import List


def split_lines(text: str) -> List[str]:
    """
    Split text into lines the way a line reader does.

    "\\n", "\\r\\n" and a lone "\\r" all end a line and are dropped. A final
    terminator does not start an extra empty line, so "a\\nb\\n" and "a\\nb"
    both give ["a", "b"], and "" gives [].
    """
    if not text:
        return []
    lines = text.replace("\r\n", "\n").replace("\r", "\n").split("\n")
    if lines[-1] == "":
        lines.pop()
    return lines
