from __future__ import annotations

import streamlit as st

from chem_erp.config import get_settings
from chem_erp.services.batches import batch_totals
from chem_erp.services.catalog import inventory_summary
from chem_erp.services.ledger import ledger_totals
from chem_erp.store import get_store
from chem_erp.utils import fmt_money

st.set_page_config(page_title="Chem ERP", page_icon="🧪", layout="wide")

st.title("🧪 Chem ERP Dashboard")
st.caption("Customers, production batches, sales & collections, purchases and expenses for a small chemical plant.")

settings = get_settings()
store = get_store()

with st.sidebar:
    st.subheader("Environment")
    st.write(f"**Company:** {settings.company_name}")
    st.write(f"**Currency:** `{settings.currency}`")
    st.caption("Data lives in this browser session only and is reset on reload of the session.")

ledger = ledger_totals(store.sales)
stock = inventory_summary(store.inventory)
production = batch_totals(store.batches)

c1, c2, c3, c4 = st.columns(4)
c1.metric("Sales", fmt_money(ledger["sales"], settings.currency))
c2.metric("Collected", fmt_money(ledger["collected"], settings.currency))
c3.metric("Outstanding", fmt_money(ledger["outstanding"], settings.currency))
c4.metric("Low stock items", f"{stock['low_stock_items']}")

c5, c6, c7 = st.columns(3)
c5.metric("Customers", f"{len(store.customers)}")
c6.metric("Production batches", f"{production['count']}")
c7.metric("Avg unit cost", fmt_money(production["avg_unit_cost"], settings.currency))

st.info(
    "Use the left sidebar navigation. Record a batch in **Production**, a sale in **Sales & Collection**, "
    "and follow up partial payments from the sales ledger.",
    icon="ℹ️",
)
