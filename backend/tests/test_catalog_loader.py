"""
Tests for the Catalog Loader.

Covers the pending -> succeeded / failed transitions and the
"no data" outcome.
"""
import pytest
from unittest.mock import MagicMock

from coursecatalog.core.config import Settings
from coursecatalog.core.exceptions import FetchError, LayoutError
from coursecatalog.models.enums import ColumnRole, LoadStatus
from coursecatalog.models.schemas import ColumnLayout
from coursecatalog.services.catalog_loader import (
    GENERIC_LOAD_ERROR,
    CatalogLoader,
    header_names_from_settings,
    load_catalog,
)


def make_loader(fetch_result=None, fetch_error=None, layout=None) -> CatalogLoader:
    source = MagicMock()
    if fetch_error is not None:
        source.fetch.side_effect = fetch_error
    else:
        source.fetch.return_value = fetch_result
    return CatalogLoader(source=source, layout=layout)


class TestCatalogLoader:
    """Load state transitions."""

    @pytest.mark.unit
    def test_starts_pending(self):
        loader = make_loader(fetch_result=b"")

        assert loader.state.status == LoadStatus.PENDING
        assert loader.state.loading is True

    @pytest.mark.unit
    def test_success_settles_with_groups(self, acme_workbook):
        loader = make_loader(fetch_result=acme_workbook)

        result = loader.load()

        assert result.status == LoadStatus.SUCCEEDED
        assert result.loading is False
        assert result.error is None
        assert result.total == 1
        assert result.universities[0].institution_name == "Acme Uni (00123)"
        assert loader.state is result

    @pytest.mark.unit
    def test_no_data_is_success_not_failure(self, headers_only_workbook):
        result = make_loader(fetch_result=headers_only_workbook).load()

        assert result.status == LoadStatus.SUCCEEDED
        assert result.is_empty is True
        assert result.has_error is False

    @pytest.mark.unit
    def test_fetch_failure_settles_failed_with_status(self):
        error = FetchError(
            message="Failed to fetch Excel file: 404 Not Found",
            upstream_status=404,
        )
        loader = make_loader(fetch_error=error)

        result = loader.load()

        assert result.status == LoadStatus.FAILED
        assert result.loading is False
        assert "404" in result.error
        assert result.universities == []
        assert loader.error is error

    @pytest.mark.unit
    def test_parse_failure_settles_failed(self):
        result = make_loader(fetch_result=b"not a workbook").load()

        assert result.status == LoadStatus.FAILED
        assert result.error.startswith("Failed to read Excel file")
        assert result.is_empty is False

    @pytest.mark.unit
    def test_unexpected_error_surfaces_its_message(self):
        loader = make_loader(fetch_error=RuntimeError("boom"))

        result = loader.load()

        assert result.status == LoadStatus.FAILED
        assert result.error == "boom"
        assert loader.error.status_code == 500

    @pytest.mark.unit
    def test_unexpected_error_without_message_uses_generic_message(self):
        loader = make_loader(fetch_error=RuntimeError())

        result = loader.load()

        assert result.status == LoadStatus.FAILED
        assert result.error == GENERIC_LOAD_ERROR

    @pytest.mark.unit
    def test_each_load_starts_fresh(self, acme_workbook):
        source = MagicMock()
        source.fetch.side_effect = [
            FetchError(message="Failed to fetch Excel file: 500 Server Error"),
            acme_workbook,
        ]
        loader = CatalogLoader(source=source)

        assert loader.load().status == LoadStatus.FAILED
        second = loader.load()

        assert second.status == LoadStatus.SUCCEEDED
        assert loader.error is None

    @pytest.mark.unit
    def test_layout_is_applied(self):
        from tests.factories.excel_generator import ExcelGenerator

        data = ExcelGenerator.create_sheet([
            ["Provider", "Institution", "Code", "Name"],
            ["00123", "Acme Uni", "CS101", "Intro CS"],
        ])
        layout = ColumnLayout(
            provider_code=0,
            institution_name=1,
            course_code=2,
            course_name=3,
            header_rows=1,
        )

        result = make_loader(fetch_result=data, layout=layout).load()

        assert result.total == 1

    @pytest.mark.unit
    def test_load_catalog_reads_public_dir(self, tmp_path, acme_workbook):
        config = Settings(public_dir=tmp_path, workbook_base_url=None)
        config.workbook_path.write_bytes(acme_workbook)

        result = load_catalog(config)

        assert result.status == LoadStatus.SUCCEEDED
        assert result.total == 1


class TestHeaderMatching:
    """Role columns located by header text when MATCH_HEADERS is on."""

    REORDERED_ROWS = [
        ["Courses", None, None, None, None],
        ["Course Name", "CRICOS Course Code", "State", "institution name ", "Provider Code"],
        ["Intro CS", "CS101", "NSW", "Acme Uni", "00123"],
        ["Data Structures", "CS102", "NSW", "Acme Uni", "00123"],
    ]

    @pytest.mark.unit
    def test_positional_by_default(self):
        assert CatalogLoader(source=MagicMock(), config=Settings()).header_names is None

    @pytest.mark.unit
    def test_header_names_from_settings(self):
        config = Settings(match_headers=True, header_course_name="Title")

        names = header_names_from_settings(config)

        assert names[ColumnRole.PROVIDER_CODE] == "Provider Code"
        assert names[ColumnRole.COURSE_NAME] == "Title"

    @pytest.mark.unit
    def test_reordered_columns_resolved_by_header(self):
        from tests.factories.excel_generator import ExcelGenerator

        data = ExcelGenerator.create_sheet(self.REORDERED_ROWS)
        source = MagicMock()
        source.fetch.return_value = data

        result = CatalogLoader(source=source, config=Settings(match_headers=True)).load()

        assert result.status == LoadStatus.SUCCEEDED
        assert result.universities[0].institution_name == "Acme Uni (00123)"
        assert result.universities[0].courses == [
            "Intro CS (CS101)",
            "Data Structures (CS102)",
        ]

    @pytest.mark.unit
    def test_missing_header_settles_failed(self):
        from tests.factories.excel_generator import ExcelGenerator

        data = ExcelGenerator.create_sheet(self.REORDERED_ROWS)
        source = MagicMock()
        source.fetch.return_value = data
        config = Settings(match_headers=True, header_course_code="Course Code")
        loader = CatalogLoader(source=source, config=config)

        result = loader.load()

        assert result.status == LoadStatus.FAILED
        assert result.error == "Missing required headers: Course Code"
        assert isinstance(loader.error, LayoutError)
        assert loader.error.status_code == 422
