from __future__ import annotations


class CursorStateError(RuntimeError):
    """Cursor ``set``/``remove`` called with no element recorded as last returned.

    A slot is recorded by ``next``/``previous`` and forgotten again by the
    cursor's own ``add`` and ``remove``.
    """
