"""Civil and family daily cause list layout."""

import io
from typing import Any

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import (
    KeepTogether,
    Paragraph,
    SimpleDocTemplate,
    Spacer,
    Table,
    TableStyle,
)

from core.schemas.publication.pdf_render import PdfRenderContext
from core.services.cause_list_formatting import (
    case_parties,
    format_clock_time,
    format_duration,
    format_judiciary,
    format_long_date,
    format_publication_datetime,
    hearing_channel,
)

TITLE = "Civil and Family Daily Cause List"

TABLE_HEADER = [
    "Time",
    "Case ref",
    "Case name",
    "Parties",
    "Hearing type",
    "Duration",
    "Hearing channel",
]

COLUMN_WIDTHS = [18 * mm, 32 * mm, 55 * mm, 70 * mm, 35 * mm, 22 * mm, 35 * mm]

HEADER_BACKGROUND = colors.HexColor("#1d70b8")

PROVENANCE_LABELS = {
    "MANUAL_UPLOAD": "Manual Upload",
    "COMMON_PLATFORM": "Common Platform",
}


def _styles() -> dict[str, ParagraphStyle]:
    sample = getSampleStyleSheet()
    return {
        "title": ParagraphStyle(
            "ListTitle", parent=sample["Heading1"], fontSize=18, spaceAfter=6
        ),
        "heading": ParagraphStyle(
            "CourtRoom", parent=sample["Heading2"], fontSize=13, spaceBefore=10
        ),
        "body": ParagraphStyle("Body", parent=sample["Normal"], fontSize=10),
        "cell": ParagraphStyle(
            "Cell", parent=sample["Normal"], fontSize=8, leading=10
        ),
    }


def _escape(value: str) -> str:
    return value.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _location_name(context: PdfRenderContext) -> str:
    if context.language == "WELSH" and context.welsh_location_name:
        return context.welsh_location_name
    return context.location_name


def _venue_address(payload: dict[str, Any]) -> list[str]:
    address = (payload.get("venue") or {}).get("venueAddress") or {}
    lines = [line for line in address.get("line") or [] if line]
    if address.get("postCode"):
        lines.append(address["postCode"])
    return lines


def _parties_text(case: dict[str, Any]) -> str:
    parties = case_parties(case)
    rows = []
    if parties["applicant"]:
        rows.append(f"Applicant: {parties['applicant']}")
    if parties["applicant_representative"]:
        rows.append(f"Legal advisor: {parties['applicant_representative']}")
    if parties["respondent"]:
        rows.append(f"Respondent: {parties['respondent']}")
    if parties["respondent_representative"]:
        rows.append(f"Legal advisor: {parties['respondent_representative']}")
    return "<br/>".join(_escape(r) for r in rows)


def _court_room_table(court_room: dict[str, Any], cell: ParagraphStyle) -> Table:
    rows: list[list[Any]] = [TABLE_HEADER]
    for session in court_room.get("session") or []:
        for sitting in session.get("sittings") or []:
            for hearing in sitting.get("hearing") or []:
                for case in hearing.get("case") or []:
                    case_name = case.get("caseName") or ""
                    restrictions = ", ".join(
                        case.get("reportingRestrictionDetail") or []
                    )
                    if restrictions:
                        case_name = f"{case_name} ({restrictions})"
                    rows.append(
                        [
                            format_clock_time(sitting.get("sittingStart") or ""),
                            Paragraph(_escape(case.get("caseNumber") or ""), cell),
                            Paragraph(_escape(case_name), cell),
                            Paragraph(_parties_text(case), cell),
                            Paragraph(_escape(hearing.get("hearingType") or ""), cell),
                            format_duration(sitting),
                            Paragraph(
                                _escape(hearing_channel(sitting, session)), cell
                            ),
                        ]
                    )
    table = Table(rows, colWidths=COLUMN_WIDTHS, repeatRows=1)
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), HEADER_BACKGROUND),
                ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                ("FONTSIZE", (0, 0), (-1, -1), 8),
                ("VALIGN", (0, 0), (-1, -1), "TOP"),
                ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#b1b4b6")),
            ]
        )
    )
    return table


def build(payload: dict[str, Any], context: PdfRenderContext) -> bytes:
    """Lay the cause list out as a landscape A4 document and return its bytes."""
    buffer = io.BytesIO()
    styles = _styles()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=landscape(A4),
        leftMargin=12 * mm,
        rightMargin=12 * mm,
        topMargin=12 * mm,
        bottomMargin=12 * mm,
        title=TITLE,
    )

    story: list[Any] = [
        Paragraph(f"{TITLE} for {_escape(_location_name(context))}", styles["title"])
    ]
    for line in _venue_address(payload):
        story.append(Paragraph(_escape(line), styles["body"]))
    story.append(Spacer(1, 4 * mm))
    story.append(
        Paragraph(
            f"List for {format_long_date(context.content_date)}", styles["body"]
        )
    )
    published = format_publication_datetime(
        (payload.get("document") or {}).get("publicationDate") or ""
    )
    if published:
        story.append(Paragraph(f"Last updated {published}", styles["body"]))
    source = PROVENANCE_LABELS.get(context.provenance, context.provenance)
    if source:
        story.append(Paragraph(f"Data source: {_escape(source)}", styles["body"]))
    story.append(Spacer(1, 6 * mm))

    for court_list in payload.get("courtLists") or []:
        court_house = court_list.get("courtHouse") or {}
        for court_room in court_house.get("courtRoom") or []:
            heading = court_room.get("courtRoomName") or ""
            judiciary = ", ".join(
                filter(
                    None,
                    (format_judiciary(s) for s in court_room.get("session") or []),
                )
            )
            if judiciary:
                heading = f"{heading}: {judiciary}"
            story.append(
                KeepTogether(
                    [
                        Paragraph(_escape(heading), styles["heading"]),
                        _court_room_table(court_room, styles["cell"]),
                    ]
                )
            )

    doc.build(story)
    return buffer.getvalue()
