import platform

_system = platform.system()
_machine = platform.machine()

if _system == "Darwin":
    CACHE_LINE = 128 if _machine == "arm64" else 64  # Apple Silicon vs Intel Mac
else:
    CACHE_LINE = 64  # x86-64 and ARM64 on Linux/Windows, and the fallback


def cache_lines(nbytes: int) -> int:
    """Smallest whole number of cache lines (at least one) that fits nbytes."""
    return max(1, -(-nbytes // CACHE_LINE)) * CACHE_LINE
