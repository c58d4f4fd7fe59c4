"""Day 9: compacting an amphipod's disk."""

from ..day import Part


def _parse(text: str) -> tuple[list[int], list[int]]:
    lines = text.splitlines()
    if len(lines) != 1:
        raise ValueError("Disk map must be exactly one line")
    digits = [int(char) for char in lines[0]]
    files, gaps = digits[0::2], digits[1::2]
    if not files:
        raise ValueError("Disk map holds no files")
    return files, gaps


def _span_sum(start: int, length: int) -> int:
    return sum(range(start, start + length))


def _compact_blocks(files: list[int], gaps: list[int]) -> int:
    remaining = list(files)
    last = len(remaining) - 1
    checksum = 0
    position = 0
    for file_id, size in enumerate(remaining):
        checksum += file_id * _span_sum(position, remaining[file_id])
        position += remaining[file_id]
        if file_id >= len(gaps):
            continue
        gap = gaps[file_id]
        for offset in range(gap):
            while last > file_id and remaining[last] == 0:
                last -= 1
            if last <= file_id:
                break
            remaining[last] -= 1
            checksum += (position + offset) * last
        position += gap
    return checksum


def _compact_files(files: list[int], gaps: list[int]) -> int:
    # Each segment is (file id, length); free space has no file id.
    disk: list[tuple[int | None, int]] = []
    for file_id, size in enumerate(files):
        disk.append((file_id, size))
        if file_id < len(gaps):
            disk.append((None, gaps[file_id]))

    for file_id in reversed(range(len(files))):
        size = files[file_id]
        current = next(i for i, (owner, _) in enumerate(disk) if owner == file_id)
        for i, (owner, length) in enumerate(disk[:current]):
            if owner is None and length >= size:
                disk[i] = (None, length - size)
                disk.insert(i, (file_id, size))
                disk[current + 1] = (None, size)
                break

    checksum = 0
    position = 0
    for owner, length in disk:
        if owner is not None:
            checksum += owner * _span_sum(position, length)
        position += length
    return checksum


def solve(text: str, part) -> str:
    """Filesystem checksum after moving single blocks (part one) or whole files (part two)."""
    files, gaps = _parse(text)
    compact = _compact_blocks if part == Part.ONE else _compact_files
    return str(compact(files, gaps))