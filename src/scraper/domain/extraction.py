import re
from typing import Pattern, Sequence

# ```bash / ```shell / ```sh 開頭，直到下一個 ``` 為止
BASH_BLOCK_PATTERN: Pattern[str] = re.compile(r"```(?:bash|shell|sh)\s*\n([\s\S]*?)```", re.I)


def extract_bash_blocks(markdown: str) -> list[str]:
    blocks: list[str] = []
    for match in BASH_BLOCK_PATTERN.finditer(markdown or ""):
        code = match.group(1).strip()
        if code:
            blocks.append(code)
    return blocks


def filter_by_prefix(blocks: Sequence[str], exclude_prefixes: Sequence[str]) -> list[str]:
    """Drop lines whose stripped text starts with an excluded prefix.

    Blocks left with nothing but whitespace are removed entirely. With no
    prefixes the input blocks are returned as-is.
    """
    if not exclude_prefixes:
        return list(blocks)

    prefixes = tuple(exclude_prefixes)
    filtered: list[str] = []
    for block in blocks:
        kept = [line for line in block.split("\n") if not line.strip().startswith(prefixes)]
        joined = "\n".join(kept)
        if joined.strip():
            filtered.append(joined)
    return filtered
