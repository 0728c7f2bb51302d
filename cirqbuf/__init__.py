import importlib

# PEP 562
_symbols = {
    "RingBuffer": "cirqbuf.ring",
    "Error": "cirqbuf.ring",
    "Region": "cirqbuf.region",
}

__all__ = list(_symbols.keys())

def __dir__():
    return list(globals().keys()) + list(_symbols.keys())

def __getattr__(name):
    if name in _symbols:
        mod = importlib.import_module(_symbols[name])
        val = getattr(mod, name)
        globals()[name] = val  # cache for next time
        return val
    raise AttributeError(f"module 'cirqbuf' has no attribute '{name}'")
