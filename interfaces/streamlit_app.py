"""
Streamlit web interface for the special functions library.

Interactive UI with tabs for:
- Function explorer (plot any one-argument or two-argument function)
- Inverse solvers with convergence details
- Diagnostics against scipy.special
"""

import streamlit as st
import numpy as np
import pandas as pd
import plotly.graph_objects as go
from src.core.beta import regularized_incomplete_beta
from src.core.error_function import erf
from src.core.gamma import digamma, gamma, gammaln
from src.core.incomplete_gamma import lower_gamma, upper_gamma
from src.core.lambert import lambert
from src.diagnostics.identities import check_against_reference, check_gamma_minimum
from src.solvers.inverse import solve_incomplete_beta, solve_lower_gamma

st.set_page_config(page_title="Special Functions Toolkit", layout="wide")

st.title("Special Functions Toolkit")
st.markdown("Gamma, beta, error and Lambert W functions with explicit solver outcomes")

# Sidebar parameters
st.sidebar.header("Plot Range")
x_min = st.sidebar.number_input("x min", value=0.1)
x_max = st.sidebar.number_input("x max", value=5.0)
points = st.sidebar.slider("Points", 20, 500, 200)
shape = st.sidebar.number_input("Shape parameter (s or a)", value=2.0, min_value=0.01)
shape_b = st.sidebar.number_input("Second shape parameter (b)", value=3.0, min_value=0.01)

ONE_ARGUMENT = {
    "erf": erf,
    "gamma": gamma,
    "gammaln": gammaln,
    "digamma": digamma,
    "lambert (principal)": lambda x: lambert(x, True),
    "lambert (secondary)": lambda x: lambert(x, False),
}
TWO_ARGUMENT = {
    "lower_gamma(s, x)": lambda x: lower_gamma(shape, x),
    "upper_gamma(s, x)": lambda x: upper_gamma(shape, x),
    "incomplete_beta(a, b, x)": lambda x: regularized_incomplete_beta(shape, shape_b, x),
}

# Main tabs
tab1, tab2, tab3 = st.tabs(["Function Explorer", "Inverse Solvers", "Diagnostics"])

with tab1:
    st.header("Function Explorer")

    selected = st.multiselect(
        "Functions", list(ONE_ARGUMENT) + list(TWO_ARGUMENT), default=["gamma", "digamma"]
    )
    x_values = np.linspace(x_min, x_max, points)

    fig = go.Figure()
    table = {"x": x_values}
    for name in selected:
        fn = ONE_ARGUMENT.get(name) or TWO_ARGUMENT[name]
        y_values = [fn(float(x)) for x in x_values]
        table[name] = y_values
        fig.add_trace(go.Scatter(x=x_values, y=y_values, name=name))
    fig.update_layout(title="Special Functions", xaxis_title="x", yaxis_title="f(x)")
    st.plotly_chart(fig, use_container_width=True)

    with st.expander("Values"):
        st.dataframe(pd.DataFrame(table))

with tab2:
    st.header("Inverse Solvers")

    col1, col2 = st.columns(2)

    with col1:
        st.subheader("Lower incomplete gamma")
        target = st.number_input("γ(s, x) target", value=float(lower_gamma(shape, 2.0)), min_value=0.0)
        gamma_method = st.selectbox("Method", ["auto", "secant", "brent"], key="gamma_method")
        if st.button("Solve for x", key="solve_gamma"):
            result = solve_lower_gamma(shape, target, gamma_method)
            if result.success:
                st.success(f"x = {result.value:.10g}")
            else:
                st.error(f"Solver failed: {result.message}")
            st.info(f"Method: {result.method} | Iterations: {result.iterations}")

    with col2:
        st.subheader("Regularized incomplete beta")
        p = st.slider("Probability p", 0.0, 1.0, 0.5)
        beta_method = st.selectbox("Method", ["auto", "newton", "brent"], key="beta_method")
        if st.button("Solve for x", key="solve_beta"):
            result = solve_incomplete_beta(shape, shape_b, p, beta_method)
            if result.success:
                st.success(f"x = {result.value:.10g}")
            else:
                st.error(f"Solver failed: {result.message}")
            st.info(f"Method: {result.method} | Iterations: {result.iterations}")

with tab3:
    st.header("Diagnostics")

    minimum = check_gamma_minimum()
    st.metric("Gamma minimum constants", "valid" if minimum.is_valid else "INVALID")
    for violation in minimum.violations:
        st.warning(violation)

    rows = []
    for x in np.linspace(max(x_min, 0.1), x_max, 10):
        for name in ("erf", "gamma", "gammaln", "digamma"):
            result = check_against_reference(name, float(x))
            rows.append({"function": name, "x": float(x), "agrees with scipy": result.is_valid})
    st.table(pd.DataFrame(rows))
