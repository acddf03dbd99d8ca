"""Shared PDF rendering engine, initialised once and handed to the PDF adapter."""

from __future__ import annotations

import importlib
import logging
import threading
from types import ModuleType
from typing import Callable

from examace.errors import EnvironmentUnsupported


logger = logging.getLogger(__name__)


def _import_pymupdf() -> ModuleType:
    return importlib.import_module("pymupdf")


class PdfEngine:
    """Lazily loads pymupdf on first use and reuses it for the process lifetime.

    Construct one instance at application startup and pass it to every
    :class:`~examace.ingestion.adapters.pdf_adapter.PDFAdapter`. Concurrent
    first calls to :meth:`ensure_ready` run the setup exactly once; later
    calls return the cached module without taking the lock.
    """

    def __init__(self, *, loader: Callable[[], ModuleType] = _import_pymupdf) -> None:
        self._loader = loader
        self._lock = threading.Lock()
        self._module: ModuleType | None = None
        self._init_count = 0

    @property
    def is_ready(self) -> bool:
        return self._module is not None

    @property
    def init_count(self) -> int:
        """How many times setup actually ran (0 or 1 in practice)."""

        return self._init_count

    def ensure_ready(self) -> ModuleType:
        module = self._module
        if module is not None:
            return module

        with self._lock:
            if self._module is not None:
                return self._module

            try:
                module = self._loader()
            except ImportError as exc:
                raise EnvironmentUnsupported(
                    extension="pdf",
                    message=f"PDF processing is unavailable in this environment: {exc}",
                ) from exc

            self._configure(module)
            self._init_count += 1
            self._module = module
            logger.info("PDF engine initialised (pymupdf %s)", getattr(module, "VersionBind", "unknown"))
            return module

    def open(self, data: bytes):
        """Open an in-memory PDF document."""

        module = self.ensure_ready()
        return module.open(stream=data, filetype="pdf")

    def _configure(self, module: ModuleType) -> None:
        # MuPDF echoes parse problems to stderr; they surface as exceptions instead.
        tools = getattr(module, "TOOLS", None)
        if tools is not None:
            tools.mupdf_display_errors(False)
