"""
Job Application Tracker – Streamlit frontend.
No business logic in layout; persistence, scraping and filtering live in services/agents.
"""

import asyncio
from datetime import date
from typing import Optional

import streamlit as st

from job_tracker_ai.agents.scrape_agent import run_scrape_agent
from job_tracker_ai.config import APPLICATION_STATUSES, DATABASE_PATH, DEFAULT_USER_ID, OPENAI_API_KEY
from job_tracker_ai.errors import JobTrackerError
from job_tracker_ai.schemas.application import JobApplication, JobApplicationCreate, JobApplicationUpdate
from job_tracker_ai.schemas.extraction import ExtractionResult
from job_tracker_ai.services.filter_service import (
    ALL_STATUSES_KEY,
    filter_by_status,
    search_applications,
    summarize_applications,
)
from job_tracker_ai.services.record_store import RecordStore

STATUS_FILTER_OPTIONS = [ALL_STATUSES_KEY] + list(APPLICATION_STATUSES.keys())
STATUS_OPTIONS = list(APPLICATION_STATUSES.keys())


@st.cache_resource
def _get_store() -> RecordStore:
    return RecordStore(DATABASE_PATH)


def _status_label(key: str) -> str:
    if key == ALL_STATUSES_KEY:
        return "All Status"
    return APPLICATION_STATUSES.get(key, key.title())


def _run_scrape(url: str) -> ExtractionResult:
    """Run the Scrape Agent on a fresh event loop (Streamlit scripts are synchronous)."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    try:
        return loop.run_until_complete(run_scrape_agent(url))
    finally:
        loop.close()


def _render_dashboard(applications: list) -> None:
    summary = summarize_applications(applications)
    st.subheader("Application Overview")
    st.caption("Track your job search progress and success metrics")
    cols = st.columns(len(APPLICATION_STATUSES) + 1)
    cols[0].metric("Total Applications", int(summary["total"]))
    for col, (key, label) in zip(cols[1:], APPLICATION_STATUSES.items()):
        col.metric(label, int(summary[key]))
    st.metric("Success Rate", f"{summary['success_rate']:.1f}%", help="Applications resulting in acceptance")


def _render_autofill() -> None:
    """Quick add from job URL: fills the form defaults in session state."""
    with st.expander("Auto-fill from URL"):
        job_url = st.text_input(
            "Job Posting URL",
            placeholder="https://company.com/jobs/position",
            key="job_url",
            help="Paste a job posting URL from LinkedIn, Indeed, company career pages, or other job boards.",
        )
        if st.button("Auto-fill", key="autofill_btn"):
            if not job_url or not job_url.strip():
                st.session_state["scrape_error"] = "Please enter a job URL"
            elif not OPENAI_API_KEY:
                st.session_state["scrape_error"] = "OPENAI_API_KEY is not set. Add it to your .env file."
            else:
                with st.spinner("Scraping…"):
                    try:
                        st.session_state["prefill"] = _run_scrape(job_url.strip())
                        st.session_state["scrape_error"] = None
                    except JobTrackerError as e:
                        st.session_state["scrape_error"] = f"Failed to scrape job data: {e}"
        if st.session_state.get("scrape_error"):
            st.error(st.session_state["scrape_error"])


def _render_form(store: RecordStore, owner_id: int, application: Optional[JobApplication] = None) -> None:
    """Add form (application is None) or edit form for an existing record."""
    prefill: Optional[ExtractionResult] = None if application else st.session_state.get("prefill")
    source = application or prefill
    form_key = f"edit_{application.id}" if application else "add_form"

    with st.form(form_key, clear_on_submit=application is None):
        col1, col2 = st.columns(2)
        with col1:
            company = st.text_input("Company *", value=source.company if source else "")
            location = st.text_input(
                "Location", value=(source.location or "") if source else "", placeholder="e.g., San Francisco, CA or Remote"
            )
            status = st.selectbox(
                "Status *",
                options=STATUS_OPTIONS,
                index=STATUS_OPTIONS.index(application.status) if application else 0,
                format_func=_status_label,
            )
        with col2:
            position = st.text_input("Position *", value=source.position if source else "")
            salary = st.text_input(
                "Salary Range", value=(source.salary or "") if source else "", placeholder="e.g., $80,000 - $100,000"
            )
            if application:
                default_date = application.applied_date
            elif prefill:
                default_date = date.fromisoformat(prefill.applied_date)
            else:
                default_date = date.today()
            applied_date = st.date_input("Application Date *", value=default_date)
        notes = st.text_area(
            "Notes",
            value=(source.notes or "") if source else "",
            placeholder="Add any additional notes, interview details, or follow-up actions...",
        )
        submitted = st.form_submit_button("Update Application" if application else "Add Application")

    if not submitted:
        return
    if not company.strip() or not position.strip():
        st.error("Company and position are required.")
        return
    fields = dict(
        company=company.strip(),
        position=position.strip(),
        location=location,
        salary=salary,
        status=status,
        applied_date=applied_date,
        notes=notes,
    )
    if application:
        store.update(owner_id, application.id, JobApplicationUpdate(**fields))
        st.session_state["editing_id"] = None
    else:
        store.create(owner_id, JobApplicationCreate(**fields))
        st.session_state["prefill"] = None
    st.rerun()


def _render_card(store: RecordStore, owner_id: int, application: JobApplication) -> None:
    with st.container(border=True):
        col_a, col_b = st.columns([4, 1])
        with col_a:
            st.markdown(f"### {application.position}")
            st.caption(f"**Company:** {application.company} · **Status:** {_status_label(application.status)}")
            if application.location:
                st.caption(f"**Location:** {application.location}")
            if application.salary:
                st.caption(f"**Salary:** {application.salary}")
            st.caption(f"Applied: {application.applied_date.strftime('%b %d, %Y')}")
            if application.notes:
                st.markdown(application.notes)
        with col_b:
            if st.button("Edit", key=f"edit_btn_{application.id}"):
                st.session_state["editing_id"] = application.id
                st.rerun()
            if st.button("Delete", key=f"delete_btn_{application.id}"):
                store.delete(owner_id, application.id)
                st.rerun()
        if st.session_state.get("editing_id") == application.id:
            _render_form(store, owner_id, application)


def render_layout() -> None:
    """Streamlit page layout; filters and persistence use services layer."""
    st.set_page_config(page_title="Job Application Tracker", layout="wide")
    st.title("Job Application Tracker")
    st.markdown("*Manage and track your job search progress.*")
    st.divider()

    for key, default in (("prefill", None), ("scrape_error", None), ("editing_id", None)):
        if key not in st.session_state:
            st.session_state[key] = default

    store = _get_store()
    owner_id = store.get_or_create_user(DEFAULT_USER_ID)
    applications = store.list(owner_id)

    _render_dashboard(applications)
    st.divider()

    # ----- Add application -----
    st.subheader("Add Application")
    _render_autofill()
    _render_form(store, owner_id)
    st.divider()

    # ----- Search / filter -----
    st.subheader("Applications")
    fcol1, fcol2 = st.columns([3, 1])
    with fcol1:
        search_term = st.text_input("Search applications...", key="search_term")
    with fcol2:
        status_filter = st.selectbox(
            "Status", options=STATUS_FILTER_OPTIONS, format_func=_status_label, key="status_filter"
        )
    filtered = filter_by_status(search_applications(applications, search_term), status_filter)

    if not applications:
        st.info("No applications yet. Add your first one above.")
    elif not filtered:
        st.warning("No applications match your search or filter.")
    for application in filtered:
        _render_card(store, owner_id, application)


if __name__ == "__main__":
    render_layout()
