"""Text builders shared by the chunking tests."""

import random

_PROSE = "lorem ipsum dolor sit amet consectetur adipiscing elit sed do eiusmod "


def prose(length: int) -> str:
    """Lowercase filler text of exactly ``length`` chars, never a heading."""
    text = (_PROSE * (length // len(_PROSE) + 1))[:length]
    return text[:-1] + "."


def build_document(seed: int, pages: int = 8) -> dict[int, str]:
    """Deterministic mixed-structure document: headings, lists and prose."""
    rng = random.Random(seed)
    document: dict[int, str] = {}
    heading_number = 0
    for page in range(1, pages + 1):
        blocks: list[str] = []
        for _ in range(rng.randint(1, 9)):
            kind = rng.random()
            if kind < 0.2:
                heading_number += 1
                blocks.append(f"Section {heading_number} Overview")
            elif kind < 0.35:
                items = rng.randint(2, 6)
                blocks.append("\n".join(f"- item {i} of the list" for i in range(items)))
            else:
                blocks.append(prose(rng.randint(20, 1500)))
        document[page] = "\n\n".join(blocks)
    return document
