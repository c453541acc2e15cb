"""
Streamlit UI for theater billing statements.

Features:
- Load a sample invoice or build one from the play catalog
- Statement table, totals and the plain-text report
- Per-line calculation trace
- Export to CSV
"""
import streamlit as st
import sys
from pathlib import Path
from datetime import datetime

# Add src to path for imports
src_path = Path(__file__).parent.parent.parent
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from theater_billing.config.settings import get_settings
from theater_billing.data.loader import load_invoices
from theater_billing.engine import BillingError, Invoice, Performance, PricingEngine
from theater_billing.report import render_text, statement_frame, usd


st.set_page_config(
    page_title="Theater Billing",
    layout="wide",
    initial_sidebar_state="expanded"
)


@st.cache_resource
def get_engine():
    """Get cached engine instance."""
    return PricingEngine()


@st.cache_data
def get_sample_invoices(path: str):
    """Load the sample invoices file, if present."""
    if not Path(path).exists():
        return []
    return load_invoices(path)


try:
    engine = get_engine()
    settings = get_settings()
    sample_invoices = get_sample_invoices(str(settings.invoices_file))
except Exception as e:
    st.error(f"System Error: {e}")
    st.stop()


# ============================================================================
# SIDEBAR: Invoice source
# ============================================================================
with st.sidebar:
    st.header("🎭 Invoice")

    # None builds a new invoice; otherwise an index into sample_invoices
    source = st.selectbox(
        "Source",
        [None] + list(range(len(sample_invoices))),
        format_func=lambda i: "Build invoice" if i is None else f"{sample_invoices[i].customer} (#{i + 1})",
    )

    st.divider()
    st.success(f"**{len(engine.plays)} Plays Loaded**")
    if st.button("Reload catalog"):
        engine.reload_data()
        st.rerun()


st.title("Theater Billing")
st.caption(f"v1.0 | {datetime.now().strftime('%Y-%m-%d')}")

if source is None:
    customer = st.text_input("Customer", value="BigCo")

    if 'performances' not in st.session_state:
        st.session_state.performances = []

    col1, col2, col3 = st.columns([2, 1, 1])
    plays = engine.list_plays()
    with col1:
        play = st.selectbox("Play", plays, format_func=lambda p: f"{p.name} ({p.type})")
    with col2:
        audience = st.number_input("Seats", min_value=0, value=30, step=1)
    with col3:
        st.write("")
        if st.button("Add performance", use_container_width=True) and play is not None:
            st.session_state.performances.append(Performance(play_id=play.play_id, audience=int(audience)))
        if st.button("Clear", use_container_width=True):
            st.session_state.performances = []
            st.rerun()

    invoice = Invoice(customer=customer, performances=tuple(st.session_state.performances))
else:
    invoice = sample_invoices[source]

if not invoice.performances:
    st.info("Add a performance to see the statement.")
    st.stop()

try:
    statement = engine.calculate(invoice)
except BillingError as e:
    st.error(f"Cannot compute statement: {e.message}")
    st.stop()

m1, m2, m3 = st.columns(3)
m1.metric("Amount owed", usd(statement.total_amount))
m2.metric("Volume credits", statement.total_volume_credits)
m3.metric("Performances", len(statement.lines))

df = statement_frame(statement)
st.dataframe(df, use_container_width=True, hide_index=True)

st.download_button(
    "⬇️ Export CSV",
    data=df.to_csv(index=False).encode('utf-8'),
    file_name=f"statement_{statement.customer}.csv",
    mime="text/csv",
)

with st.expander("📄 Statement text"):
    st.code(render_text(statement), language=None)

with st.expander("🔍 Calculation trace"):
    for line in statement.lines:
        st.markdown(f"**{line.play_name}**")
        st.text(line.get_trace_text())
