from __future__ import annotations

import streamlit as st

from chem_erp.config import get_settings

st.set_page_config(page_title="Chem ERP", page_icon="🧪", layout="wide")

get_settings()

pages = [
    st.Page("home.py", title="Dashboard", icon="🏠"),
    st.Page("pages/1_👥_Customers.py", title="Customers", icon="👥"),
    st.Page("pages/2_🧴_Products.py", title="Products", icon="🧴"),
    st.Page("pages/3_📦_Inventory.py", title="Inventory", icon="📦"),
    st.Page("pages/4_🏭_Production.py", title="Production", icon="🏭"),
    st.Page("pages/5_🛒_Sales.py", title="Sales & Collection", icon="🛒"),
    st.Page("pages/6_🧾_Purchases.py", title="Purchases", icon="🧾"),
    st.Page("pages/7_💸_Expenses.py", title="Expenses", icon="💸"),
    st.Page("pages/8_🏦_Financial.py", title="Financial Resources", icon="🏦"),
    st.Page("pages/9_🧹_Data_Management.py", title="Data Management", icon="🧹"),
]

st.navigation(pages).run()
