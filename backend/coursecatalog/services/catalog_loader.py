"""
Catalog loader.

Runs one fetch -> parse -> group pass and settles the result into one of
three observable states: pending, succeeded (possibly empty) or failed.
Each call starts from scratch; nothing is cached between loads.
"""
import logging
from typing import Optional

from coursecatalog.core.config import Settings, settings as default_settings
from coursecatalog.core.exceptions import CatalogException
from coursecatalog.models.enums import ColumnRole
from coursecatalog.models.schemas import CatalogResponse, ColumnLayout
from coursecatalog.services.parser import extract_institutions
from coursecatalog.services.source import WorkbookSource


logger = logging.getLogger(__name__)

GENERIC_LOAD_ERROR = "An error occurred while loading the data"


def layout_from_settings(config: Optional[Settings] = None) -> ColumnLayout:
    """Build the column layout from configured column indices."""
    config = config or default_settings
    return ColumnLayout(
        provider_code=config.column_provider_code,
        institution_name=config.column_institution_name,
        course_code=config.column_course_code,
        course_name=config.column_course_name,
        header_rows=config.header_rows,
    )


def header_names_from_settings(config: Optional[Settings] = None) -> dict[ColumnRole, str]:
    """Configured header text per role, for header-driven layouts."""
    config = config or default_settings
    return {
        ColumnRole.PROVIDER_CODE: config.header_provider_code,
        ColumnRole.INSTITUTION_NAME: config.header_institution_name,
        ColumnRole.COURSE_CODE: config.header_course_code,
        ColumnRole.COURSE_NAME: config.header_course_name,
    }


class CatalogLoader:
    """
    Loads the course catalog for a single render.

    ``state`` is PENDING until ``load()`` settles it as SUCCEEDED or
    FAILED. A failed load is never reported as succeeded.
    """

    def __init__(
        self,
        source: Optional[WorkbookSource] = None,
        layout: Optional[ColumnLayout] = None,
        config: Optional[Settings] = None
    ):
        self.config = config or default_settings
        self.source = source or WorkbookSource(self.config)
        self.layout = layout or layout_from_settings(self.config)
        self.header_names = (
            header_names_from_settings(self.config) if self.config.match_headers else None
        )
        self.state = CatalogResponse.pending()
        self.error: Optional[CatalogException] = None

    def _settle(self, result: CatalogResponse) -> CatalogResponse:
        logger.debug(f"Catalog load settled: {result.status.value}")
        self.state = result
        return result

    def load(self) -> CatalogResponse:
        """
        Fetch and parse the workbook.

        Every call starts a new load from PENDING.

        Returns:
            The settled CatalogResponse. Failures are reported through
            ``status``/``error`` and kept on ``self.error``.
        """
        self.state = CatalogResponse.pending()
        self.error = None

        try:
            data = self.source.fetch()
            universities = extract_institutions(
                data,
                layout=self.layout,
                filename=self.config.workbook_filename,
                header_names=self.header_names,
                header_row=self.config.header_match_row
            )
        except CatalogException as e:
            logger.error(f"Error loading Excel file: {e.message}")
            self.error = e
            return self._settle(CatalogResponse.failed(e.message))
        except Exception as e:
            logger.exception(f"Unexpected error loading Excel file: {e}")
            message = str(e) or GENERIC_LOAD_ERROR
            self.error = CatalogException(message)
            return self._settle(CatalogResponse.failed(message))

        if not universities:
            logger.warning("No university data found in workbook")

        return self._settle(CatalogResponse.succeeded(universities))


def load_catalog(config: Optional[Settings] = None) -> CatalogResponse:
    """Run a fresh catalog load with the configured source and layout."""
    return CatalogLoader(config=config).load()
