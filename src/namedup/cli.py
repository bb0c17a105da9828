#!/usr/bin/env python3
"""
namedup CLI — interactive console front end for the duplicate search.
Asks for a root directory, lists files that share both filename and content,
and prints an estimate of the space the extra copies take. Nothing is deleted.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import os
import sys
import time
import logging
from typing import NoReturn, Tuple

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from namedup.core.models import ScanParams, DuplicateReport
from namedup.core.scanner import ScanError
from namedup.commands import DuplicateSearchCommand

logger = logging.getLogger(__name__)

BANNER = "Localizar duplicatas!"
PROMPT = "Informe pasta raiz: "

EXIT_ROOT_MISSING = -1
EXIT_ROOT_NOT_DIR = -2
EXIT_INTERRUPTED = 130


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self._init_console()

    @staticmethod
    def _init_console() -> None:
        """
        Fix encoding for consoles so accented paths and messages print cleanly.
        Filenames that are not valid UTF-8 reach stdout as their original bytes.
        """
        for stream, errors in ((sys.stdout, "surrogateescape"), (sys.stderr, "backslashreplace")):
            reconfigure = getattr(stream, "reconfigure", None)
            if reconfigure:
                reconfigure(encoding="utf-8", errors=errors)

    @staticmethod
    def read_root_dir() -> str:
        """Print the banner and read one line with the root directory."""
        print(BANNER)
        try:
            return input(PROMPT)
        except EOFError:
            return ""

    def validate_root(self, root_dir: str) -> None:
        """Fail fast, before any scanning, when the root is unusable."""
        if not root_dir or not os.path.exists(root_dir):
            self.error_exit("Pasta raiz não existe.", code=EXIT_ROOT_MISSING)
        if not os.path.isdir(root_dir):
            self.error_exit(f"Caminho não é uma pasta: {root_dir}", code=EXIT_ROOT_NOT_DIR)

    def create_params(self, root_dir: str) -> ScanParams:
        """Create ScanParams from the prompt answer."""
        try:
            return ScanParams(root_dir=root_dir)
        except ValueError as e:
            self.error_exit(f"Parâmetro inválido: {e}")

    def run_search(self, params: ScanParams) -> DuplicateReport:
        """Execute the scan -> find workflow."""
        command = DuplicateSearchCommand()
        try:
            report = command.execute(params)
        except ScanError as e:
            self.error_exit(str(e), code=EXIT_ROOT_MISSING)

        logger.debug(f"Search finished in {time.time() - self.start_time:.2f} seconds")
        return report

    @staticmethod
    def output_results(report: DuplicateReport) -> Tuple[int, int]:
        """Print every duplicate set and return (total_bytes, total_files)."""
        if not report.has_duplicates:
            print("Nenhum arquivo duplicado encontrado.")
            return report.summary()

        for duplicate_set in report.duplicate_sets:
            print(f"Arquivos duplicados encontrados para o nome: {duplicate_set.name}")
            for path in duplicate_set.paths:
                print(f" - {path}")

        return report.summary()

    @staticmethod
    def output_summary(report: DuplicateReport) -> None:
        """Print the reclaimable space estimate; silent when nothing was found."""
        if report.total_files == 0:
            return
        print(f"Tamanho em bytes que pode ser liberado: {report.reclaimable_bytes} bytes")

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ {message}", file=sys.stderr)
        sys.exit(code)

    def run(self) -> int:
        """Main entry point: prompt, validate, search, report."""
        root_dir = self.read_root_dir()
        self.validate_root(root_dir)
        params = self.create_params(root_dir)

        report = self.run_search(params)
        self.output_results(report)
        self.output_summary(report)
        return 0


def main() -> None:
    """Application entry point."""
    if os.environ.get("DEBUG"):
        logging.getLogger().setLevel(logging.DEBUG)

    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operação cancelada pelo usuário (Ctrl+C)")
        sys.exit(EXIT_INTERRUPTED)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Erro inesperado: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
