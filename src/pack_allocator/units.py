PackSize = int
Quantity = int


def is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_quantity(value: str) -> int:
    text = value.strip()
    if not text:
        raise ValueError("empty input")
    if any(ch.isspace() for ch in text):
        raise ValueError(f"not a whole number: {value!r}")
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"not a whole number: {value!r}") from None


def parse_pack_size(value: str) -> int:
    size = parse_quantity(value)
    if size < 1:
        raise ValueError(f"pack size must be at least 1, got {size}")
    return size
