"""
Module: builder.controller

Purpose:
    Orchestrate the export pipeline.
    Format → Paginate → Render → Write

Key Functions:
    - generate_pdf(): Render one Document to a PDF file
    - generate_pdfs(): Render several Documents, validating all first
    - export_questions(): Format questions and render every resulting Document

Key Classes:
    - ExportResult: Complete export result

Dependencies:
    - builder.formatting: Output strategies
    - builder.layout: Pagination
    - builder.output: PDF backend and rendering
    - builder.errors: ExportError classification
    - common.path_utils: Filenames

Used By:
    - Application code (UI event handlers, scripts)
"""

from __future__ import annotations

import itertools
import logging
import time
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Sequence, Tuple, Union

from exam_toolkit.common.path_utils import PDF_EXTENSION, generate_filename, validate_filename
from exam_toolkit.core.models import Document, FormattedOutput, OutputFormat, Question

from .config import ExportConfig
from .errors import ExportError, ExportErrorCode
from .formatting import format_questions
from .layout import LayoutConfig, LayoutResult, paginate
from .output import BackendUnavailableError, PdfBackend, ReportLabBackend, render_layout

logger = logging.getLogger(__name__)

BackendFactory = Callable[[LayoutConfig], PdfBackend]

TIMESTAMP_LABEL = "Generated on"


@dataclass(frozen=True)
class ExportResult:
    """
    Complete export result (immutable).

    Attributes:
        output: Formatted documents the PDFs were rendered from
        paths: Written PDF paths, one per document in the same order
        page_counts: Page count of each PDF
        warnings: Layout warnings raised while paginating

    Example:
        >>> result = export_questions(questions, OutputFormat.SEPARATE_DOCUMENTS)
        >>> [p.name for p in result.paths]
        ['Questions_2024-01-15_14-30.pdf', 'Answers_2024-01-15_14-30.pdf']
    """
    output: FormattedOutput
    paths: Tuple[Path, ...]
    page_counts: Tuple[int, ...]
    warnings: Tuple[str, ...] = ()

    @property
    def format(self) -> OutputFormat:
        return self.output.format

    @property
    def total_pages(self) -> int:
        return sum(self.page_counts)


def generate_pdf(
    document: Document,
    config: Optional[ExportConfig] = None,
    *,
    filename: Optional[str] = None,
    now: Optional[datetime] = None,
    backend_factory: Optional[BackendFactory] = None,
) -> Path:
    """
    Render a Document to a PDF file in config.output_dir.

    Each call builds its own backend and layout state; nothing is shared
    between calls.

    Args:
        document: Document to render
        config: Export configuration (defaults to ExportConfig())
        filename: Explicit filename; derived from the document when omitted
        now: Time used for the header timestamp and filename
        backend_factory: Creates the drawing backend (ReportLabBackend by default)

    Returns:
        Path of the written PDF

    Raises:
        ExportError: GENERATION_FAILED if the document is invalid or layout
            or drawing fails, DOWNLOAD_FAILED if the file cannot be written,
            BROWSER_UNSUPPORTED if the backend cannot be set up here

    Example:
        >>> path = generate_pdf(Document("Questions", "**Question 1:** Why?", "questions"))
        >>> path.name
        'Questions_2024-01-15_14-30.pdf'
    """
    config = config or ExportConfig()
    _validate_document(document)
    path, _ = _export_document(
        document,
        config,
        filename=filename,
        now=now or datetime.now(),
        backend_factory=backend_factory or ReportLabBackend,
    )
    return path


def generate_pdfs(
    documents: Sequence[Document],
    config: Optional[ExportConfig] = None,
    *,
    now: Optional[datetime] = None,
    backend_factory: Optional[BackendFactory] = None,
) -> List[Path]:
    """
    Render several Documents, one PDF each.

    Every document is validated before any is rendered, so an invalid
    document late in the list leaves no partial output behind. All files
    share one timestamp.

    Raises:
        ExportError: As for generate_pdf()
    """
    config = config or ExportConfig()
    if documents is None:
        raise ExportError("Documents are required for PDF generation", ExportErrorCode.GENERATION_FAILED)

    documents = list(documents)
    for document in documents:
        _validate_document(document)

    now = now or datetime.now()
    factory = backend_factory or ReportLabBackend

    paths = []
    for document in documents:
        path, _ = _export_document(document, config, filename=None, now=now, backend_factory=factory)
        paths.append(path)

    logger.info(f"Generated {len(paths)} PDF documents in {config.output_dir}")
    return paths


def export_questions(
    questions: Sequence[Question],
    output_format: Union[OutputFormat, str],
    config: Optional[ExportConfig] = None,
    *,
    now: Optional[datetime] = None,
    backend_factory: Optional[BackendFactory] = None,
) -> ExportResult:
    """
    Format questions and render every resulting Document.

    Pipeline:
    1. Format questions with the strategy for output_format
    2. Validate every document
    3. Paginate and render each document
    4. Write each PDF to config.output_dir

    Args:
        questions: Questions in display order
        output_format: OutputFormat member or its string value
        config: Export configuration
        now: Time used for header timestamps and filenames
        backend_factory: Creates the drawing backend

    Returns:
        ExportResult with paths and page counts

    Raises:
        ExportError: If any document fails to render or write
    """
    config = config or ExportConfig()
    start_time = time.perf_counter()

    output = format_questions(questions, output_format)
    logger.info(
        f"Formatted {output.question_count} questions as {output.format.value} "
        f"into {output.document_count} document(s)"
    )

    for document in output.documents:
        _validate_document(document)

    now = now or datetime.now()
    factory = backend_factory or ReportLabBackend

    paths: List[Path] = []
    page_counts: List[int] = []
    warnings: List[str] = []
    for document in output.documents:
        path, layout = _export_document(document, config, filename=None, now=now, backend_factory=factory)
        paths.append(path)
        page_counts.append(layout.page_count)
        warnings.extend(layout.warnings)

    elapsed = time.perf_counter() - start_time
    logger.info(f"Export completed in {elapsed:.2f}s")

    return ExportResult(
        output=output,
        paths=tuple(paths),
        page_counts=tuple(page_counts),
        warnings=tuple(warnings),
    )


def _validate_document(document: object) -> None:
    """
    Reject inputs that cannot be rendered at all.

    Empty content is valid and produces a page holding only the header.
    """
    if document is None:
        raise ExportError("Document is required for PDF generation", ExportErrorCode.GENERATION_FAILED)
    if not isinstance(document, Document):
        raise ExportError(
            f"Expected a Document, got {type(document).__name__}",
            ExportErrorCode.GENERATION_FAILED,
        )
    if not isinstance(document.title, str):
        raise ExportError("Document title must be a string", ExportErrorCode.GENERATION_FAILED)
    if not isinstance(document.content, str):
        raise ExportError("Document content must be a string", ExportErrorCode.GENERATION_FAILED)


def _export_document(
    document: Document,
    config: ExportConfig,
    *,
    filename: Optional[str],
    now: datetime,
    backend_factory: BackendFactory,
) -> Tuple[Path, LayoutResult]:
    """Render one validated document and write it out."""
    pdf_bytes, layout = _render_document(document, config, now, backend_factory)
    name = _resolve_filename(document, config, filename, now)
    path = _write_pdf(pdf_bytes, config.output_dir / name)
    logger.info(f"Wrote {document.title!r} ({layout.page_count} pages) to {path}")
    return path, layout


def _render_document(
    document: Document,
    config: ExportConfig,
    now: datetime,
    backend_factory: BackendFactory,
) -> Tuple[bytes, LayoutResult]:
    """
    Paginate and draw a document into PDF bytes.

    Raises:
        ExportError: BROWSER_UNSUPPORTED when the backend cannot be set up,
            GENERATION_FAILED for any other failure
    """
    layout_config = config.layout

    try:
        backend = backend_factory(layout_config)
    except BackendUnavailableError as e:
        raise ExportError(
            "PDF generation is not supported in this environment",
            ExportErrorCode.BROWSER_UNSUPPORTED,
            e,
        ) from e
    except Exception as e:
        raise ExportError("Failed to create PDF document", ExportErrorCode.GENERATION_FAILED, e) from e

    title = document.title if document.title.strip() else None
    timestamp_text = f"{TIMESTAMP_LABEL}: {now.strftime(config.timestamp_format)}"

    try:
        layout = paginate(
            document.content,
            backend.string_width,
            layout_config,
            title=title,
            timestamp_text=timestamp_text,
        )
        render_layout(layout, backend, layout_config)
        pdf_bytes = backend.finish()
    except BackendUnavailableError as e:
        raise ExportError(
            "PDF generation is not supported in this environment",
            ExportErrorCode.BROWSER_UNSUPPORTED,
            e,
        ) from e
    except Exception as e:
        logger.debug(f"Rendering {document.title!r} failed: {e}")
        raise ExportError("Failed to generate PDF document", ExportErrorCode.GENERATION_FAILED, e) from e

    return pdf_bytes, layout


def _resolve_filename(
    document: Document,
    config: ExportConfig,
    filename: Optional[str],
    now: datetime,
) -> str:
    """Pick the output filename, sanitizing an explicit one if needed."""
    if not filename:
        title = document.title if config.filename_from_title else None
        return generate_filename(document.type, title, now)

    if not filename.lower().endswith(PDF_EXTENSION):
        filename = f"{filename}{PDF_EXTENSION}"

    check = validate_filename(filename)
    if check.is_valid:
        return filename

    logger.warning(f"Filename {filename!r} rejected ({', '.join(check.issues)}), using {check.sanitized!r}")
    sanitized = check.sanitized
    if not sanitized.lower().endswith(PDF_EXTENSION) or not validate_filename(sanitized).is_valid:
        return generate_filename(document.type, None, now)
    return sanitized


def _write_pdf(pdf_bytes: bytes, path: Path) -> Path:
    """
    Deliver the finished PDF without replacing an existing file.

    When the name is taken, " (1)", " (2)", ... is appended to the stem,
    as a browser download does.

    Returns:
        Path actually written

    Raises:
        ExportError: DOWNLOAD_FAILED if the directory or file cannot be written
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        for candidate in _candidate_paths(path):
            try:
                with candidate.open("xb") as f:
                    f.write(pdf_bytes)
            except FileExistsError:
                continue
            except OSError:
                candidate.unlink(missing_ok=True)
                raise
            if candidate != path:
                logger.info(f"{path.name} already exists, saved as {candidate.name}")
            return candidate
    except OSError as e:
        raise ExportError(
            f"Failed to save PDF file to {path}",
            ExportErrorCode.DOWNLOAD_FAILED,
            e,
        ) from e


def _candidate_paths(path: Path) -> Iterator[Path]:
    yield path
    for n in itertools.count(1):
        yield path.with_name(f"{path.stem} ({n}){path.suffix}")
