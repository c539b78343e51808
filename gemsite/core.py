"""
gemsite Core Engine

Builds an HTML site from a gemtext source tree: the whole input
directory is copied, then every .gmi document in the copy is replaced
by its HTML rendering. Everything else is left byte-for-byte intact.
"""

import os
import shutil
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .converters.gemtext_converter import GemtextConverter


class SiteGeneratorError(Exception):
    """Base class for site build failures."""
    pass


class CopyError(SiteGeneratorError):
    """Raised when the input tree cannot be copied to the output directory."""
    pass


@dataclass
class BuildReport:
    """Outcome of a single site build."""
    output_dir: Path
    converted: list[Path] = field(default_factory=list)
    skipped: list[Path] = field(default_factory=list)

    @property
    def error_count(self) -> int:
        return len(self.skipped)


class SiteGenerator:
    """
    Main site build engine.

    Mirrors ``input_dir`` into ``output_dir`` and converts the gemtext
    documents found there. Conversions run one at a time, in path order.
    """

    def __init__(self, input_dir: str | Path, output_dir: str | Path, quiet: bool = False):
        self.input_dir = Path(input_dir)
        self.output_dir = Path(output_dir)
        self.quiet = quiet

    def build(self) -> BuildReport:
        """
        Copy the input tree and convert its gemtext documents.

        Returns:
            A BuildReport listing converted and skipped documents.

        Raises:
            CopyError: If the recursive copy fails (for example because the
                output directory already exists). Nothing is rolled back.
        """
        self.copy_tree()

        report = BuildReport(output_dir=self.output_dir)
        for gmi_path in self.find_documents():
            self._log(f"[GMI] Converting: {gmi_path}")
            try:
                html_text = GemtextConverter.convert(gmi_path)
            except OSError:
                print(f"[ERROR] couldn't read {gmi_path}", file=sys.stderr)
                report.skipped.append(gmi_path)
                continue
            html_path = GemtextConverter.write(gmi_path, html_text)
            self._log(f"[SAVED] {html_path}")
            report.converted.append(html_path)

        return report

    def copy_tree(self) -> None:
        """Recursively copy the input directory; the target must not exist."""
        self._log(f"[COPY] {self.input_dir} -> {self.output_dir}")
        if not self.input_dir.is_dir():
            raise CopyError(f"Input directory not found: {self.input_dir}")
        try:
            shutil.copytree(self.input_dir, self.output_dir)
        except OSError as e:
            raise CopyError(str(e)) from e

    def find_documents(self) -> list[Path]:
        """Collect every gemtext document in the output tree before any is touched."""
        documents = []
        for dirpath, _, filenames in os.walk(self.output_dir):
            for filename in filenames:
                if GemtextConverter.can_handle(filename):
                    documents.append(Path(dirpath) / filename)
        return sorted(documents)

    def _log(self, message: str) -> None:
        if not self.quiet:
            print(message)

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of how each kind of file is handled."""
        return {
            "Converted to HTML": sorted(GemtextConverter.SUPPORTED_EXTENSIONS),
            "Copied verbatim": ["all other files"],
        }
