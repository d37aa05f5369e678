"""FNV-1a/32 hash for the sigil handshake - must match the browser script byte for byte."""

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193


def hash32(data: str | bytes) -> str:
    """
    Compute FNV-1a/32 and return it as 8 lowercase hex digits.
    CRITICAL: str input is hashed as UTF-8 bytes, same as TextEncoder in JS.
    Not a security hash.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    h = FNV32_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV32_PRIME) & 0xFFFFFFFF
    return f"{h:08x}"
