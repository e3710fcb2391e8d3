"""Display formatting for civil and family daily cause list payloads.

Shared by the PDF renderer and by the case summary included in
subscription emails.
"""

from datetime import date, datetime
from typing import Any
from zoneinfo import ZoneInfo

LONDON = ZoneInfo("Europe/London")

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

PARTY_ROLES = {
    "APPLICANT_PETITIONER": "APPLICANT_PETITIONER",
    "APPLICANT/PETITIONER": "APPLICANT_PETITIONER",
    "APPLICANT_PETITIONER_REPRESENTATIVE": "APPLICANT_PETITIONER_REPRESENTATIVE",
    "APPLICANT/PETITIONER REPRESENTATIVE": "APPLICANT_PETITIONER_REPRESENTATIVE",
    "RESPONDENT": "RESPONDENT",
    "RESPONDENT_REPRESENTATIVE": "RESPONDENT_REPRESENTATIVE",
}

NO_CASES_MESSAGE = "No cases scheduled."


def format_long_date(value: date) -> str:
    """``7 March 2025`` style date."""
    return f"{value.day} {MONTHS[value.month - 1]} {value.year}"


def _parse_timestamp(value: str) -> datetime | None:
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=LONDON)
    return parsed.astimezone(LONDON)


def format_clock_time(value: str) -> str:
    """``10am`` or ``2:30pm`` in London time, empty for unparseable input."""
    parsed = _parse_timestamp(value)
    if parsed is None:
        return ""
    period = "pm" if parsed.hour >= 12 else "am"
    hour = parsed.hour % 12 or 12
    minutes = f":{parsed.minute:02d}" if parsed.minute else ""
    return f"{hour}{minutes}{period}"


def format_publication_datetime(value: str) -> str:
    """``12 November 2025 at 9am`` in London time."""
    parsed = _parse_timestamp(value)
    if parsed is None:
        return ""
    return f"{format_long_date(parsed.date())} at {format_clock_time(value)}"


def format_duration(sitting: dict[str, Any]) -> str:
    """Sitting length as ``1 hour 30 mins``, empty without both bounds."""
    start = _parse_timestamp(sitting.get("sittingStart") or "")
    end = _parse_timestamp(sitting.get("sittingEnd") or "")
    if start is None or end is None:
        return ""
    total_minutes = round((end - start).total_seconds() / 60)
    hours, minutes = divmod(max(total_minutes, 0), 60)
    parts = []
    if hours:
        parts.append(f"{hours} hour{'s' if hours > 1 else ''}")
    if minutes:
        parts.append(f"{minutes} min{'s' if minutes > 1 else ''}")
    return " ".join(parts)


def format_judiciary(session: dict[str, Any]) -> str:
    """Judiciary names with the presiding member first."""
    names: list[str] = []
    for judiciary in session.get("judiciary") or []:
        name = (judiciary.get("johKnownAs") or "").strip()
        if not name:
            continue
        if judiciary.get("isPresiding"):
            names.insert(0, name)
        else:
            names.append(name)
    return ", ".join(names)


def hearing_channel(sitting: dict[str, Any], session: dict[str, Any]) -> str:
    """Sitting channel, falling back to the session channel."""
    channel = sitting.get("channel") or session.get("sessionChannel") or []
    return ", ".join(channel)


def party_name(party: dict[str, Any]) -> str:
    """Individual's full name or the organisation name."""
    individual = party.get("individualDetails")
    if individual:
        parts = (
            individual.get("title"),
            individual.get("individualForenames"),
            individual.get("individualMiddleName"),
            individual.get("individualSurname"),
        )
        return " ".join(p for p in parts if p).strip()
    organisation = party.get("organisationDetails") or {}
    return (organisation.get("organisationName") or "").strip()


def case_parties(case: dict[str, Any]) -> dict[str, str]:
    """Group party names by normalised role."""
    grouped: dict[str, list[str]] = {role: [] for role in set(PARTY_ROLES.values())}
    for party in case.get("party") or []:
        role = PARTY_ROLES.get(party.get("partyRole", ""))
        name = party_name(party)
        if role and name:
            grouped[role].append(name)
    return {
        "applicant": ", ".join(grouped["APPLICANT_PETITIONER"]),
        "applicant_representative": ", ".join(
            grouped["APPLICANT_PETITIONER_REPRESENTATIVE"]
        ),
        "respondent": ", ".join(grouped["RESPONDENT"]),
        "respondent_representative": ", ".join(grouped["RESPONDENT_REPRESENTATIVE"]),
    }


def iter_hearings(payload: dict[str, Any]):
    """Yield ``(court_room, session, sitting, hearing, case)`` for every case."""
    for court_list in payload.get("courtLists") or []:
        court_house = court_list.get("courtHouse") or {}
        for court_room in court_house.get("courtRoom") or []:
            for session in court_room.get("session") or []:
                for sitting in session.get("sittings") or []:
                    for hearing in sitting.get("hearing") or []:
                        for case in hearing.get("case") or []:
                            yield court_room, session, sitting, hearing, case


def extract_case_summary(payload: dict[str, Any]) -> list[list[tuple[str, str]]]:
    """Label/value pairs describing each case, for the email summary.

    The applicant is included only when one is named.
    """
    summaries = []
    for _room, _session, _sitting, hearing, case in iter_hearings(payload):
        fields = []
        applicant = case_parties(case)["applicant"]
        if applicant:
            fields.append(("Applicant", applicant))
        fields.extend(
            [
                ("Case reference", case.get("caseNumber") or ""),
                ("Case name", case.get("caseName") or ""),
                ("Case type", case.get("caseType") or ""),
                ("Hearing type", hearing.get("hearingType") or ""),
            ]
        )
        summaries.append(fields)
    return summaries


def format_case_summary(summaries: list[list[tuple[str, str]]]) -> str:
    """Render case summaries as plain text for GOV.UK Notify markdown."""
    if not summaries:
        return NO_CASES_MESSAGE
    blocks = [
        "\n".join(f"{label} - {value}" for label, value in fields)
        for fields in summaries
    ]
    return "\n\n---\n\n".join(blocks)
