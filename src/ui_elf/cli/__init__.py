"""UI Elf CLI layer.

Expose ``cli`` and ``main`` lazily so ``python -m ui_elf.cli.main`` does not
trigger runpy's warning about an already-imported submodule.
"""

__all__ = ["cli", "main"]


def __getattr__(name):  # pragma: no cover - trivial lazy import
    if name in {"cli", "main"}:
        from .main import cli as _cli
        from .main import main as _main

        return _cli if name == "cli" else _main
    raise AttributeError(name)
