"""Write a generated TypeSpec project to disk."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from sls_to_typespec.emitters.tspconfig import render_tspconfig
from sls_to_typespec.emitters.typespec_emitter import TypeSpecEmitter
from sls_to_typespec.models.options import GeneratorOptions

if TYPE_CHECKING:
    from sls_to_typespec.ir.typespec import TypeSpecIR

MAIN_FILE = "main.tsp"
CONFIG_FILE = "tspconfig.yaml"


class TypeSpecWriter:
    """Write main.tsp and tspconfig.yaml into an output directory.

    Usage:
        writer = TypeSpecWriter(options)
        writer.write(ir_list, Path("typespec"))

    Or for in-memory rendering:
        files = writer.render(ir_list)
    """

    def __init__(self, options: GeneratorOptions | None = None) -> None:
        """Initialize the writer.

        Args:
        ----
            options: Generator options used by both files.

        """
        self._options = options or GeneratorOptions()

    def render(self, ir_list: list[TypeSpecIR]) -> dict[str, str]:
        """Render the project files without writing them.

        Returns
        -------
            File name -> content.

        """
        return {
            MAIN_FILE: TypeSpecEmitter(self._options).emit(ir_list),
            CONFIG_FILE: render_tspconfig(self._options),
        }

    def write(self, ir_list: list[TypeSpecIR], output_dir: Path) -> list[Path]:
        """Write the project files, creating output_dir if needed.

        Returns
        -------
            Paths of the written files.

        """
        output_dir.mkdir(parents=True, exist_ok=True)

        written: list[Path] = []
        for name, content in self.render(ir_list).items():
            path = output_dir / name
            path.write_text(content, encoding="utf-8")
            written.append(path)

        return written
