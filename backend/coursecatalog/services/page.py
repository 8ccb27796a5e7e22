"""
Page shell for the Course Catalog.

Renders a CatalogResponse as a single HTML page: the institution list with
expandable course panels, an error panel, or the "no data" guidance.
"""
from html import escape

from coursecatalog.core.config import settings
from coursecatalog.models.schemas import CatalogResponse, InstitutionGroup


class PageTemplates:
    """Page template definitions using simple string formatting."""

    BASE_HTML = """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="utf-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
        body {{ font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, sans-serif; line-height: 1.6; color: #333; background: #f9fafb; }}
        .container {{ max-width: 960px; margin: 0 auto; padding: 32px 20px; }}
        h1 {{ color: #1e3a8a; }}
        .total {{ color: #4b5563; margin-bottom: 16px; }}
        .card {{ background: #fff; border: 1px solid #e5e7eb; border-radius: 8px; padding: 24px; margin-bottom: 32px; box-shadow: 0 1px 2px rgba(0,0,0,0.05); }}
        .card summary {{ display: flex; justify-content: space-between; align-items: center; cursor: pointer; list-style: none; }}
        .card summary::-webkit-details-marker {{ display: none; }}
        .card h3 {{ margin: 0; font-size: 20px; color: #1e3a8a; }}
        .button {{ display: inline-flex; align-items: center; gap: 8px; background: #3b82f6; color: white; padding: 8px 16px; border-radius: 6px; font-size: 14px; }}
        .button:hover {{ background: #2563eb; }}
        .badge {{ background: white; color: #3b82f6; border-radius: 9999px; width: 24px; height: 24px; display: inline-flex; align-items: center; justify-content: center; font-size: 12px; font-weight: 700; }}
        .courses {{ background: #f9fafb; border-radius: 8px; padding: 16px; margin-top: 16px; }}
        .courses li {{ color: #374151; margin-bottom: 8px; }}
        .panel {{ padding: 16px; border-radius: 8px; }}
        .panel-error {{ color: #dc2626; border: 1px solid #fca5a5; }}
        .panel-empty {{ color: #d97706; border: 1px solid #fcd34d; }}
        .panel h3 {{ margin-top: 0; }}
    </style>
</head>
<body>
    <div class="container">
        <h1>{title}</h1>
        {content}
    </div>
</body>
</html>
"""

    @classmethod
    def loading(cls) -> str:
        return '<div class="panel"><p>Loading university data...</p></div>'

    @classmethod
    def error(cls, message: str) -> str:
        return f"""
        <div class="panel panel-error">
            <h3>Error Loading Data</h3>
            <p>{escape(message)}</p>
        </div>
"""

    @classmethod
    def empty(cls, workbook_filename: str) -> str:
        return f"""
        <div class="panel panel-empty">
            <h3>No University Data Found</h3>
            <p>Please check:</p>
            <ul>
                <li>Excel file is named '{escape(workbook_filename)}' in the public folder</li>
                <li>Excel file has the correct columns:
                    <ul>
                        <li>Institution Name</li>
                        <li>Course Name</li>
                        <li>CRICOS Course Code</li>
                    </ul>
                </li>
            </ul>
            <p>Check the server log for more details.</p>
        </div>
"""

    @classmethod
    def institution(cls, group: InstitutionGroup) -> str:
        courses = "\n".join(
            f"                    <li>{escape(course)}</li>" for course in group.courses
        )
        return f"""
        <details class="card">
            <summary>
                <h3>{escape(group.institution_name)}</h3>
                <span class="button">Courses <span class="badge">{len(group.courses)}</span></span>
            </summary>
            <div class="courses">
                <ul>
{courses}
                </ul>
            </div>
        </details>
"""

    @classmethod
    def institution_list(cls, universities: list[InstitutionGroup]) -> str:
        cards = "".join(cls.institution(group) for group in universities)
        return f'<p class="total">Total Universities: {len(universities)}</p>{cards}'


def render_catalog_page(result: CatalogResponse) -> str:
    """Render the page for a catalog load result in any state."""
    if result.loading:
        content = PageTemplates.loading()
    elif result.has_error:
        content = PageTemplates.error(result.error or "")
    elif result.is_empty:
        content = PageTemplates.empty(settings.workbook_filename)
    else:
        content = PageTemplates.institution_list(result.universities)

    return PageTemplates.BASE_HTML.format(
        title=escape(settings.page_title),
        content=content,
    ).strip()
