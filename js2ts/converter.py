"""
JavaScript → TypeScript Converter

Pipeline per file: read → parse → annotate → generate → write.
Files in a directory are processed strictly sequentially.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from js2ts.common.exceptions import ConversionError, InvalidInputError, wrap_os_error
from js2ts.common.observability import get_logger
from js2ts.config.groups import ConversionConfig
from js2ts.generation.ts_emitter import TypeScriptEmitter
from js2ts.inference.annotator import TypeAnnotator
from js2ts.models import AnnotationResult
from js2ts.parsing.ast_tree import AstTree
from js2ts.parsing.source_file import SourceFile

logger = get_logger(__name__)


class FileStatus(str, Enum):
    """Outcome for one source file"""

    CONVERTED = "converted"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class ConversionOutput:
    """Converted text plus the annotations that produced it"""

    code: str
    annotations: AnnotationResult


@dataclass
class FileResult:
    """
    Result of converting one file.

    Attributes:
        source: Input path
        target: Output path
        status: Outcome
        annotation_count: Annotations written (0 unless converted)
        error: Error message for failed files
    """

    source: Path
    target: Path
    status: FileStatus
    annotation_count: int = 0
    error: str | None = None


@dataclass
class ConversionReport:
    """Results for a directory run, in processing order"""

    directory: Path
    results: list[FileResult] = field(default_factory=list)

    def _with_status(self, status: FileStatus) -> list[FileResult]:
        return [r for r in self.results if r.status == status]

    @property
    def converted(self) -> list[FileResult]:
        return self._with_status(FileStatus.CONVERTED)

    @property
    def skipped(self) -> list[FileResult]:
        return self._with_status(FileStatus.SKIPPED)

    @property
    def failed(self) -> list[FileResult]:
        return self._with_status(FileStatus.FAILED)

    @property
    def ok(self) -> bool:
        return not self.failed


class TypeScriptConverter:
    """
    Converts JavaScript sources to annotated TypeScript.

    Thread-Safety: instances hold no per-file state; the tree for each file
    is created and discarded inside a single call.
    """

    def __init__(
        self,
        config: ConversionConfig | None = None,
        annotator: TypeAnnotator | None = None,
        emitter: TypeScriptEmitter | None = None,
    ):
        self.config = config or ConversionConfig()
        self.annotator = annotator or TypeAnnotator()
        self.emitter = emitter or TypeScriptEmitter()

    # ============================================================
    # Source level
    # ============================================================

    def convert_source(self, code: str, file_path: str = "<string>") -> ConversionOutput:
        """
        Convert JavaScript text to TypeScript text.

        Args:
            code: JavaScript source
            file_path: Name used in error messages

        Returns:
            ConversionOutput

        Raises:
            ParsingError: If the source has syntax errors
        """
        source = SourceFile.from_content(code, file_path=file_path, language=self.config.grammar)
        return self._convert(source)

    def convert_path(self, path: str | Path) -> ConversionOutput:
        """
        Read a JavaScript file and convert it without writing anything.

        Raises:
            FileAccessError: If the file cannot be read or decoded
            ParsingError: If the source has syntax errors
        """
        source = SourceFile.from_file(path, language=self.config.grammar, encoding=self.config.encoding)
        return self._convert(source)

    def _convert(self, source: SourceFile) -> ConversionOutput:
        ast_tree = AstTree.parse(source)
        annotations = self.annotator.annotate(ast_tree)
        code = self.emitter.generate(ast_tree, annotations)
        return ConversionOutput(code=code, annotations=annotations)

    # ============================================================
    # File level
    # ============================================================

    def target_path_for(self, path: str | Path) -> Path:
        """
        Sibling output path.

        The first occurrence of the source suffix in the file name is
        replaced by the target suffix (`app.js` → `app.ts`).
        """
        path = Path(path)
        name = path.name.replace(self.config.source_suffix, self.config.target_suffix, 1)
        return path.with_name(name)

    def convert_file(self, path: str | Path) -> FileResult:
        """
        Convert one file and write its TypeScript sibling.

        Args:
            path: JavaScript file

        Returns:
            FileResult (CONVERTED or SKIPPED)

        Raises:
            ParsingError: If the source has syntax errors
            FileAccessError: If reading or writing fails
        """
        path = Path(path)
        target = self.target_path_for(path)

        if target.exists() and not self.config.overwrite:
            logger.warning("file_skipped", source=str(path), target=str(target), reason="target_exists")
            return FileResult(source=path, target=target, status=FileStatus.SKIPPED)

        output = self.convert_path(path)

        try:
            target.write_text(output.code, encoding=self.config.encoding)
        except OSError as e:
            raise wrap_os_error(e, f"Failed to write {target}", path=str(target)) from e

        logger.info(
            "file_converted",
            source=str(path),
            target=str(target),
            annotations=len(output.annotations),
        )
        return FileResult(
            source=path,
            target=target,
            status=FileStatus.CONVERTED,
            annotation_count=len(output.annotations),
        )

    # ============================================================
    # Directory level
    # ============================================================

    def discover_sources(self, directory: str | Path) -> list[Path]:
        """
        Source files in a directory.

        Regular files whose name ends with the source suffix, sorted.
        Subdirectories are searched only when ``recursive`` is set.

        Raises:
            InvalidInputError: If the directory does not exist
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise InvalidInputError(f"Not a directory: {directory}", details={"path": str(directory)})

        candidates = directory.rglob("*") if self.config.recursive else directory.iterdir()
        return sorted(p for p in candidates if p.is_file() and p.name.endswith(self.config.source_suffix))

    def convert_directory(self, directory: str | Path) -> ConversionReport:
        """
        Convert every source file in a directory.

        Per-file failures are logged and recorded; with
        ``continue_on_error`` disabled the first failure propagates.

        Args:
            directory: Directory to scan

        Returns:
            ConversionReport
        """
        directory = Path(directory)
        report = ConversionReport(directory=directory)

        for path in self.discover_sources(directory):
            try:
                result = self.convert_file(path)
            except ConversionError as e:
                if not self.config.continue_on_error:
                    raise
                logger.error("file_conversion_failed", source=str(path), error=str(e))
                result = FileResult(
                    source=path,
                    target=self.target_path_for(path),
                    status=FileStatus.FAILED,
                    error=str(e),
                )
            report.results.append(result)

        logger.info(
            "directory_converted",
            directory=str(directory),
            converted=len(report.converted),
            skipped=len(report.skipped),
            failed=len(report.failed),
        )
        return report
