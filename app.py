"""Streamlit front-end for the balance file validator."""
from __future__ import annotations

from typing import Mapping

import pandas as pd
import streamlit as st

from balance_checker import (
    BalanceFileValidator,
    BalanceValidationContext,
    UploadedBalanceFile,
    ValidateBalanceFileUseCase,
)
from balance_checker.config import configure_logging
from balance_checker.domain import messages
from balance_checker.presentation.result_report import details_to_rows, render_csv


class StreamlitResultSink:
    """Shows outcomes in the page instead of returning them."""

    def show_success(self, message: str) -> None:
        st.success(f"**{messages.TITLE_APPROVED}**\n\n{message}")

    def show_failure(self, message: str, details: Mapping[str, str] | None = None) -> None:
        st.error(f"**{messages.TITLE_REJECTED}**\n\n{message}")
        if details:
            st.table(pd.DataFrame([{"field": label, "value": value} for label, value in details.items()]))


configure_logging()
st.set_page_config(page_title="Balance File Validator", layout="centered")
st.title("Balance File Validator")
st.caption("Expected name: TVWXYBZDDMMYYYY.txt, with balance code Z between 1 and 4.")

uploaded = st.file_uploader("Upload balance file", type=["txt"])
validate_btn = st.button("Validate")

if validate_btn:
    if uploaded is None:
        st.warning(messages.NO_FILE_SELECTED)
    else:
        source = UploadedBalanceFile(uploaded.name, uploaded.getvalue())
        context = BalanceValidationContext(validator=BalanceFileValidator(), sink=StreamlitResultSink())
        response = ValidateBalanceFileUseCase(context).execute(source)
        if details_to_rows(response.outcome):
            st.download_button(
                "Download reconciliation details CSV",
                data=render_csv(response.outcome),
                file_name=f"{uploaded.name.rsplit('.', 1)[0]}_details.csv",
                mime="text/csv",
            )
