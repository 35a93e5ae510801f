import os
from typing import List

BASE_PATH = os.path.join(os.path.dirname(__file__), "..", "static")

def load_message(filename: str, **kwargs) -> str:
    path = os.path.join(BASE_PATH, "messages", filename)
    with open(path, encoding="utf-8") as f:
        text = f.read().rstrip("\n")
    return text.format(**kwargs) if kwargs else text

def load_lines(filename: str) -> List[str]:
    path = os.path.join(BASE_PATH, filename)
    with open(path, encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]
