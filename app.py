"""Streamlit front end for the insurance claim submission form."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict

import streamlit as st

from claimform.models.claim import ClaimCategory
from claimform.models.feedback import FeedbackStatus, FormFeedback
from claimform.submission import get_config, get_validator, submit_claim
from claimform.validation.messages import format_limit


APP_TITLE = "Claim Form"

FORM_FIELDS = ("category", "description", "receipt_date", "claim_amount")

CURRENCY_SYMBOLS: Dict[str, str] = {
    "INR": "₹",
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
}


def init_state() -> None:
    st.session_state.setdefault("feedback", FormFeedback.cleared())
    st.session_state.setdefault("last_submission_id", "")


def reset_form() -> None:
    """Clear every field and the banner."""
    for key in FORM_FIELDS:
        st.session_state.pop(key, None)
    st.session_state.feedback = FormFeedback.cleared()


def collect_values() -> Dict[str, Any]:
    return {key: st.session_state.get(key) for key in FORM_FIELDS}


def handle_submit() -> None:
    outcome = submit_claim(collect_values(), now=datetime.now())
    st.session_state.feedback = outcome.feedback
    st.session_state.last_submission_id = outcome.submission_id


def category_label(category: ClaimCategory) -> str:
    limit = get_validator().limit_for(category)
    return f"{category.value} (max {format_limit(limit)})"


def render_feedback(feedback: FormFeedback) -> None:
    if feedback.status is FeedbackStatus.SUCCESS:
        st.success(feedback.message)
        if st.session_state.last_submission_id:
            st.caption(f"Reference: {st.session_state.last_submission_id}")
    elif feedback.status is FeedbackStatus.ERROR:
        st.error(feedback.message)


@st.fragment(run_every="1s")
def watch_reset() -> None:
    """Reset the form once a success banner has been up long enough."""
    feedback = st.session_state.get("feedback")
    if feedback is not None and feedback.is_expired(datetime.now()):
        reset_form()
        st.rerun()


# --------------------------- STREAMLIT UI ---------------------------

st.set_page_config(page_title=APP_TITLE, layout="centered")
init_state()
config = get_config()
validator = get_validator()

st.title(APP_TITLE)
render_feedback(st.session_state.feedback)

with st.form("claim_form", clear_on_submit=False):
    st.selectbox(
        "Category",
        list(ClaimCategory),
        index=None,
        format_func=category_label,
        placeholder="Select a category",
        key="category",
    )
    st.text_area(
        "Claim Description",
        max_chars=validator.max_description_length,
        placeholder=f"Enter claim description (max {validator.max_description_length} characters)",
        key="description",
    )
    st.date_input(
        "Receipt Date",
        value=None,
        max_value=date.today(),
        key="receipt_date",
    )

    currency_col, amount_col = st.columns([1, 3])
    with currency_col:
        st.selectbox(
            "Currency",
            config.form.currencies,
            format_func=lambda code: f"{CURRENCY_SYMBOLS.get(code, '')} {code}".strip(),
            key="currency",
        )
    with amount_col:
        st.number_input(
            "Claim Amount",
            min_value=0.0,
            step=0.01,
            value=None,
            format="%.2f",
            placeholder="Enter claim amount",
            key="claim_amount",
        )

    submit_col, reset_col = st.columns(2)
    with submit_col:
        st.form_submit_button("Submit", type="primary", on_click=handle_submit, width="stretch")
    with reset_col:
        st.form_submit_button("Reset", on_click=reset_form, width="stretch")

if st.session_state.feedback.reset_at is not None:
    watch_reset()

st.markdown(
    '<div class="small">Claims are validated in this browser session only; nothing is stored.</div>',
    unsafe_allow_html=True,
)
